# tests/unit/core/test_values.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from amcore.core.errors import ErrorKind, NumericParseError
from amcore.core.tokens import Atom, Sequence
from amcore.core.values import (
    EMPTY,
    Boolean,
    BufferKind,
    CellKind,
    Diagnostic,
    Empty,
    Numeric,
    Reference,
    Symbol,
    Text,
    is_empty,
    result_of,
)

# -----------------------------------------------------------------------------
# RESULT VALUES
# -----------------------------------------------------------------------------


def test_result_of_wraps_plain_values():
    assert result_of(True) == Boolean(True)
    assert result_of(3) == Numeric(3)
    assert result_of(2.5) == Numeric(2.5)
    assert result_of("x") == Symbol("x")
    assert result_of("xy") == Text("xy")
    assert result_of(Atom("a")) == Symbol("a")
    assert result_of(Sequence("ab")) == Text("ab")
    assert result_of(None) is EMPTY


def test_result_of_checks_bool_before_int():
    assert isinstance(result_of(False), Boolean)


def test_result_of_passes_results_through():
    numeric = Numeric(1)
    assert result_of(numeric) is numeric


def test_opaque_payload_becomes_reference():
    payload = object()
    ref = result_of(payload)
    assert isinstance(ref, Reference)
    assert ref.value is payload
    assert ref == Reference(payload)
    assert ref != Reference(object())


def test_empty_is_singleton_and_falsy():
    assert Empty() is EMPTY
    assert not EMPTY
    assert is_empty(EMPTY)
    assert not is_empty(Numeric(0))


def test_diagnostic_is_falsy_but_not_empty():
    diag = Diagnostic(ErrorKind.NUMERIC_PARSE, "bad")
    assert not diag
    assert not is_empty(diag)
    assert Boolean(False)


# -----------------------------------------------------------------------------
# CELL CODECS
# -----------------------------------------------------------------------------


def test_integer_codec():
    codec = CellKind.INTEGER.codec
    assert codec.from_text("42") == 42
    assert codec.from_text("-7") == -7
    assert codec.default == 0
    assert codec.buffer is BufferKind.ARRAY


@pytest.mark.parametrize("literal", ["abc", "4.2", "", "9223372036854775808"])
def test_integer_codec_rejects_bad_literals(literal):
    with pytest.raises(NumericParseError) as exc_info:
        CellKind.INTEGER.codec.from_text(literal)
    assert exc_info.value.kind is ErrorKind.NUMERIC_PARSE


def test_byte_codec_accepts_symbol_or_number():
    codec = CellKind.BYTE.codec
    assert codec.from_text("A") == 65
    assert codec.from_text("7") == 7
    assert codec.from_text("255") == 255
    with pytest.raises(NumericParseError):
        codec.from_text("256")


def test_codepoint_codec():
    codec = CellKind.CODEPOINT.codec
    assert codec.from_text("z") == "z"
    assert codec.from_text("65") == "A"
    assert codec.default == "\0"


def test_float_and_boolean_codecs():
    assert CellKind.FLOAT.codec.from_text("1.5") == 1.5
    with pytest.raises(NumericParseError):
        CellKind.FLOAT.codec.from_text("one")
    assert CellKind.BOOLEAN.codec.from_text("TRUE") is True
    assert CellKind.BOOLEAN.codec.from_text("1") is True
    assert CellKind.BOOLEAN.codec.from_text("yes") is False
    assert CellKind.BOOLEAN.codec.to_text(True) == "true"


def test_make_buffer_per_kind():
    ints = CellKind.INTEGER.codec.make_buffer(4)
    assert list(ints) == [0, 0, 0, 0]
    assert ints.typecode == "q"
    texts = CellKind.TEXT.codec.make_buffer(2)
    assert texts == ["", ""]
    assert CellKind.TEXT.codec.is_blank("")
    assert not CellKind.TEXT.codec.is_blank("a")


@pytest.mark.parametrize("kind", list(CellKind))
def test_cell_codecs_satisfy_protocol(kind):
    from amcore.interfaces.protocols import ValueCodec

    assert isinstance(kind.codec, ValueCodec)
