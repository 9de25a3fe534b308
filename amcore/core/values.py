# amcore/core/values.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Closed result type returned by every semantic handler, and the cell codecs
that bind a concrete element kind to the tape.
"""

from __future__ import annotations

import re
from array import array
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

from amcore.core.errors import ErrorKind, NumericParseError
from amcore.core.tokens import Atom, Sequence

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INTEGER_LITERAL = re.compile(r"[+-]?\d+")


# -----------------------------------------------------------------------------
# RESULT VALUES
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Symbol:
    value: str


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Numeric:
    value: Union[int, float]


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True, eq=False)
class Reference:
    """Opaque payload. Compared by identity of the referenced object."""

    value: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self.value is other.value

    def __hash__(self) -> int:
        return id(self.value)


class Empty:
    """The "no result" sentinel. Use the ``EMPTY`` singleton."""

    _instance = None

    def __new__(cls) -> "Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


@dataclass(frozen=True)
class Diagnostic:
    """A command that matched but failed; distinguishable from success and from EMPTY."""

    kind: ErrorKind
    message: str

    def __bool__(self) -> bool:
        return False


ResultValue = Union[Symbol, Text, Numeric, Boolean, Reference, Empty, Diagnostic]


def result_of(value: Any) -> ResultValue:
    """Wrap a plain Python value into the matching ResultValue variant."""
    if isinstance(value, (Symbol, Text, Numeric, Boolean, Reference, Empty, Diagnostic)):
        return value
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, (int, float)):
        return Numeric(value)
    if isinstance(value, Atom):
        return Symbol(value.symbol)
    if isinstance(value, Sequence):
        return Text(value.text)
    if isinstance(value, str):
        return Symbol(value) if len(value) == 1 else Text(value)
    return Reference(value)


def is_empty(result: ResultValue) -> bool:
    return result is EMPTY


# -----------------------------------------------------------------------------
# CELL CODECS
# -----------------------------------------------------------------------------


class BufferKind(Enum):
    ARRAY = "array"
    LIST = "list"


@dataclass(frozen=True)
class CellCodec:
    """
    Capability bound to one tape element kind: construct a cell from text,
    render it back to text, and supply the blank value.
    """

    name: str
    default: Any
    buffer: BufferKind
    from_text: Callable[[str], Any]
    to_text: Callable[[Any], str]
    typecode: str = ""

    def make_buffer(self, size: int):
        if self.buffer is BufferKind.ARRAY:
            return array(self.typecode, [self.default]) * size
        return [self.default] * size

    def is_blank(self, value: Any) -> bool:
        return value == self.default


def _parse_integer(text: str, low: int, high: int) -> int:
    text = text.strip()
    if not _INTEGER_LITERAL.fullmatch(text):
        raise NumericParseError(f"This is not a number: {text!r}", {"literal": text})
    value = int(text)
    if not low <= value <= high:
        raise NumericParseError(
            f"Number {value} is out of range [{low}, {high}]",
            {"literal": text, "low": low, "high": high},
        )
    return value


def _parse_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise NumericParseError(f"This is not a number: {text!r}", {"literal": text})


def _parse_byte(text: str) -> int:
    if len(text) == 1 and not text.isdigit():
        code = ord(text)
        if code > 0xFF:
            raise NumericParseError(f"Symbol {text!r} does not fit in a byte", {"literal": text})
        return code
    return _parse_integer(text, 0, 0xFF)


def _parse_codepoint(text: str) -> str:
    if len(text) == 1:
        return text
    return chr(_parse_integer(text, 0, 0x10FFFF))


def _parse_boolean(text: str) -> bool:
    return text.strip().lower() in ("true", "1")


class CellKind(Enum):
    """Concrete tape element kinds. Each one fixes its codec and buffer shape."""

    BYTE = CellCodec("byte", 0, BufferKind.ARRAY, _parse_byte, str, "B")
    CODEPOINT = CellCodec("codepoint", "\0", BufferKind.LIST, _parse_codepoint, str)
    TEXT = CellCodec("text", "", BufferKind.LIST, str, str)
    INTEGER = CellCodec(
        "integer", 0, BufferKind.ARRAY, lambda t: _parse_integer(t, INT64_MIN, INT64_MAX), str, "q"
    )
    FLOAT = CellCodec("float", 0.0, BufferKind.ARRAY, _parse_float, repr, "d")
    BOOLEAN = CellCodec("boolean", False, BufferKind.LIST, _parse_boolean, lambda v: "true" if v else "false")

    @property
    def codec(self) -> CellCodec:
        return self.value


DEFAULT_CELL_KIND = CellKind.INTEGER
