# tests/unit/core/test_language.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Unit tests for the rule engine."""

from unittest.mock import MagicMock

import pytest

from amcore.core.charclasses import CHARACTER_CLASSES, DIGIT
from amcore.core.errors import DuplicateConceptError
from amcore.core.language import NO_MATCH, Language
from amcore.core.tokens import Atom, Buffer, Sequence
from amcore.core.values import EMPTY, Boolean, Numeric, Symbol, Text

# -----------------------------------------------------------------------------
# CONSTRUCTION
# -----------------------------------------------------------------------------


def test_default_language_preloads_character_classes(language):
    names = [name.text for name in language.concept_names()]
    assert names == list(CHARACTER_CLASSES)


def test_command_language_has_alphabet_but_no_concepts(command_language):
    assert command_language.concepts == ()
    assert command_language.is_word("write 5")
    assert not command_language.is_well_formed("write 5")


def test_alphabet_contains_every_concept_symbol(language):
    alphabet = language.alphabet
    for concept in language.concepts:
        assert set(concept.name.text) <= alphabet


# -----------------------------------------------------------------------------
# ALPHABET
# -----------------------------------------------------------------------------


def test_add_symbols_reports_whether_all_new(command_language):
    assert command_language.add_symbols("éè")
    assert not command_language.add_symbols("éê")
    assert "ê" in command_language.alphabet


def test_add_symbols_accepts_iterables(command_language):
    assert command_language.add_symbols({"α", "β"})
    assert command_language.is_word("αβ")


def test_is_word(command_language):
    assert command_language.is_word(Atom("a"))
    assert not command_language.is_word("café")


# -----------------------------------------------------------------------------
# REGISTRATION
# -----------------------------------------------------------------------------


def test_interpret_appends_concept(command_language):
    syntax = MagicMock(return_value=True)
    semantic = MagicMock(return_value=Numeric(1))
    assert command_language.interpret(set(), "one", syntax, semantic)
    assert command_language.has_concept("one")
    assert command_language.evaluate("anything") == (Sequence("one"), Numeric(1))
    semantic.assert_called_once_with(Sequence("anything"))


def test_interpret_merges_extra_symbols(command_language):
    command_language.interpret({"ß"}, "eszett", lambda t: False, lambda t: EMPTY)
    assert "ß" in command_language.alphabet


def test_duplicate_registration_is_rejected_without_mutation(command_language):
    command_language.interpret(set(), "dup", lambda t: False, lambda t: EMPTY)
    before = command_language.concepts
    alphabet = command_language.alphabet
    with pytest.raises(DuplicateConceptError) as exc_info:
        command_language.interpret({"þ"}, "dup", lambda t: True, lambda t: EMPTY)
    assert exc_info.value.details == {"name": "dup"}
    assert command_language.concepts == before
    assert command_language.alphabet == alphabet


def test_duplicate_builtin_class_is_rejected(language):
    with pytest.raises(DuplicateConceptError):
        language.interpret_predicate(DIGIT, "digit")


# -----------------------------------------------------------------------------
# EVALUATION
# -----------------------------------------------------------------------------


def test_first_match_precedence_shadows_digit(language):
    # "printable" is registered before "digit" and accepts every digit.
    name, result = language.evaluate("5628")
    assert name == Sequence("printable")
    assert result == Text("5628")


def test_control_wins_for_control_characters(language):
    name, result = language.evaluate(Atom("\n"))
    assert name == Sequence("control")
    assert result == Symbol("\n")


def test_evaluate_without_match_returns_sentinel(command_language):
    assert command_language.evaluate("nothing") is NO_MATCH
    assert command_language.evaluate("nothing").result is EMPTY


def test_well_formed_requires_word_and_interpretation(language):
    assert language.is_well_formed("abc")
    assert not language.is_well_formed("café")
    assert language.has_interpretation("abc")


def test_later_specific_concept_never_wins(language):
    language.interpret(set(), "answer", lambda t: t == Sequence("42"), lambda t: Numeric(42))
    assert language.evaluate("42").name == Sequence("printable")


# -----------------------------------------------------------------------------
# BINDERS
# -----------------------------------------------------------------------------


def test_value_binding_returns_fixed_result(command_language):
    command_language.interpret_value("pi", 3.14)
    assert command_language.evaluate("pi").result == Numeric(3.14)
    assert command_language.evaluate("PI").result == Numeric(3.14)
    assert command_language.evaluate("pie").result is EMPTY


def test_nullary_binding_invokes_thunk_each_time(command_language):
    counter = iter(range(10))
    command_language.interpret_nullary("tick", lambda: next(counter))
    assert command_language.evaluate("tick").result == Numeric(0)
    assert command_language.evaluate("tick").result == Numeric(1)


def test_nullary_binding_ignores_atoms(command_language):
    command_language.interpret_nullary("x", lambda: True)
    assert command_language.evaluate(Sequence("x")).result == Boolean(True)
    assert command_language.evaluate(Atom("x")).result is EMPTY


def test_command_binding_matches_aliases_case_insensitively(command_language):
    received = []
    command_language.interpret_command("echo", ("echo", "eo"), lambda p: received.append(p) or p)
    assert command_language.evaluate("ECHO hello world").result == Text("hello world")
    assert command_language.evaluate("eo hi").result == Text("hi")
    assert received == [Sequence("hello world"), Sequence("hi")]
    assert command_language.evaluate("echoes x").result is EMPTY


def test_command_binding_without_strip_passes_whole_line(command_language):
    command_language.interpret_command("say", ("say",), lambda p: p, strip=False)
    assert command_language.evaluate("say it").result == Text("say it")


def test_command_binding_requiring_argument(command_language):
    command_language.interpret_command("put", ("put",), lambda p: True, requires_argument=True)
    assert not command_language.is_well_formed("put")
    assert not command_language.is_well_formed("put   ")
    assert command_language.is_well_formed("put 1")


def test_command_binding_rejects_atoms(command_language):
    command_language.interpret_command("g", ("g",), lambda p: True)
    assert not command_language.has_interpretation(Atom("g"))


# -----------------------------------------------------------------------------
# TOKENIZING PRIMITIVES
# -----------------------------------------------------------------------------


def test_munch_consumes_chunk_and_surrounding_whitespace():
    buffer = Buffer("  write   5  ")
    assert Language.munch(buffer) == Sequence("write")
    assert buffer.text == "5  "
    assert Language.munch(buffer) == Sequence("5")
    assert buffer.text == ""
    assert Language.munch(buffer) == Sequence("")


def test_nibble_removes_single_leading_atom():
    buffer = Buffer(" ab c")
    assert Language.nibble(buffer) == Atom("a")
    assert buffer.text == "b c"
    assert Language.nibble(Buffer("   ")) is None


def test_lick_does_not_consume(language):
    seq = Sequence("load foo")
    assert language.lick(seq) == Sequence("load")
    assert language.lick_atom(seq) == Atom("l")
    assert seq == Sequence("load foo")


def test_chunkify_splits_on_whitespace(language):
    assert language.chunkify("  a bb\tccc\n") == [Sequence("a"), Sequence("bb"), Sequence("ccc")]
    assert language.chunkify("") == []


def test_chunkify_consumes_buffers(language):
    buffer = Buffer("x y")
    assert language.chunkify(buffer) == [Sequence("x"), Sequence("y")]
    assert not buffer
