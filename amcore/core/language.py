# amcore/core/language.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, Iterable, List, NamedTuple, Optional, Tuple, Union

from amcore.core.charclasses import ALL_CLASSIFIED, CHARACTER_CLASSES, is_alphabetic, is_whitespace, satisfies
from amcore.core.errors import DuplicateConceptError
from amcore.core.tokens import EMPTY_TOKEN, Atom, Buffer, Sequence, Token, TokenLike, lower, symbols, text_of, to_token
from amcore.core.values import EMPTY, ResultValue, result_of
from amcore.interfaces.types import Semantic, Syntax, Thunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Concept:
    """
    One registered grammar rule: a name, a syntax recognizer deciding whether
    a token belongs to the rule, and a semantic handler producing its value.
    """

    name: Token
    syntax: Syntax
    semantic: Semantic


class Evaluation(NamedTuple):
    name: Token
    result: ResultValue


NO_MATCH = Evaluation(EMPTY_TOKEN, EMPTY)


class Language:
    """
    A formal language: an alphabet of valid symbols and an ordered list of
    concepts. Registration order is match precedence. Evaluation picks the
    first concept whose syntax accepts the token and never backtracks, even
    when a later concept is more specific.
    """

    def __init__(self, character_concepts: bool = True) -> None:
        """
        :param character_concepts: Register the twelve built-in character-class
            concepts. When False the alphabet is still seeded with the same
            symbols, but no class concept can shadow later command concepts.
        """
        self._alphabet: set = set()
        self._concepts: List[Concept] = []
        if character_concepts:
            for class_name, members in CHARACTER_CLASSES.items():
                self.interpret_predicate(members, class_name)
        else:
            self.add_symbols(ALL_CLASSIFIED)

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset(self._alphabet)

    @property
    def concepts(self) -> Tuple[Concept, ...]:
        return tuple(self._concepts)

    def concept_names(self) -> List[Token]:
        return [c.name for c in self._concepts]

    # -------------------------------------------------------------------------
    # Alphabet and recognition
    # -------------------------------------------------------------------------

    def add_symbols(self, source: Union[TokenLike, Iterable[str]]) -> bool:
        """
        Insert every symbol of ``source`` into the alphabet.

        :param source: A token, plain text, or any iterable of symbols.
        :return: True if every insertion was new.
        """
        if isinstance(source, (Atom, Sequence, str)):
            source = symbols(source)
        all_new = True
        for symbol in source:
            if symbol in self._alphabet:
                all_new = False
            else:
                self._alphabet.add(symbol)
        return all_new

    def is_word(self, token: TokenLike) -> bool:
        """True iff every symbol of ``token`` is in the alphabet."""
        return all(symbol in self._alphabet for symbol in symbols(token))

    def has_interpretation(self, token: TokenLike) -> bool:
        """True iff some concept's syntax accepts ``token``."""
        token = to_token(token)
        return any(c.syntax(token) for c in self._concepts)

    def is_well_formed(self, token: TokenLike) -> bool:
        return self.is_word(token) and self.has_interpretation(token)

    def has_concept(self, name: TokenLike) -> bool:
        name = to_token(name)
        return any(c.name == name for c in self._concepts)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def interpret(
        self,
        extra_symbols: Iterable[str],
        name: TokenLike,
        syntax: Syntax,
        semantic: Semantic,
    ) -> bool:
        """
        Register a concept.

        :param extra_symbols: Symbols merged into the alphabet with the name.
        :param name: Unique name of the concept.
        :param syntax: Recognizer deciding whether a token belongs to the concept.
        :param semantic: Handler producing the ResultValue of an accepted token.
        :raises DuplicateConceptError: If ``name`` is already registered.
        """
        name = to_token(name)
        if self.has_concept(name):
            raise DuplicateConceptError(f"Concept {text_of(name)!r} is already registered", {"name": text_of(name)})
        self.add_symbols(name)
        self.add_symbols(extra_symbols)
        if not self.is_word(name):
            return False
        self._concepts.append(Concept(name, syntax, semantic))
        logger.debug("Registered concept %r (%d total)", text_of(name), len(self._concepts))
        return True

    def interpret_value(self, name: TokenLike, value: Any) -> bool:
        """Bind ``name`` to a fixed result."""
        name = to_token(name)
        result = result_of(value)
        return self.interpret((), name, lambda token: self._name_syntax(name, token), lambda token: result)

    def interpret_nullary(self, name: TokenLike, thunk: Thunk) -> bool:
        """Bind ``name`` to a zero-argument function invoked on every evaluation."""
        name = to_token(name)
        return self.interpret((), name, lambda token: self._name_syntax(name, token), lambda token: result_of(thunk()))

    def interpret_predicate(self, members: FrozenSet[str], name: TokenLike) -> bool:
        """Bind ``name`` to a character class: accepts tokens made only of ``members``, evaluates to itself."""
        return self.interpret(members, name, lambda token: satisfies(members, token), result_of)

    def interpret_command(
        self,
        name: TokenLike,
        aliases: Iterable[str],
        fn: Callable[[Sequence], Any],
        strip: bool = True,
        requires_argument: bool = False,
    ) -> bool:
        """
        Bind a multi-word command whose leading word, case-folded, is one of ``aliases``.

        :param fn: Receives the line without its command word, or the whole
            line when ``strip`` is False.
        :param requires_argument: Reject the line when nothing follows the command word.
        """
        commands = frozenset(alias.lower() for alias in aliases)
        extra = set()
        for alias in commands:
            extra.update(alias)

        def syntax(token: Token) -> bool:
            return self._command_syntax(token, commands, requires_argument)

        def semantic(token: Token) -> ResultValue:
            buffer = Buffer(token)
            if strip:
                self.munch(buffer)
            return result_of(fn(buffer.to_sequence()))

        return self.interpret(extra, name, syntax, semantic)

    @staticmethod
    def _name_syntax(name: Token, token: Token) -> bool:
        if type(name) is not type(token):
            return False
        return is_alphabetic(name) and lower(name) == lower(token)

    def _command_syntax(self, token: Token, commands: FrozenSet[str], requires_argument: bool) -> bool:
        if not isinstance(token, Sequence):
            return False
        buffer = Buffer(token)
        command = self.munch(buffer)
        if lower(command).text not in commands:
            return False
        return bool(buffer) or not requires_argument

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def evaluate(self, token: TokenLike) -> Evaluation:
        """
        Return ``(name, result)`` of the first concept whose syntax accepts the
        token, or ``NO_MATCH`` when none does.
        """
        token = to_token(token)
        for concept in self._concepts:
            if concept.syntax(token):
                return Evaluation(concept.name, concept.semantic(token))
        logger.debug("No concept accepts %r", text_of(token))
        return NO_MATCH

    # -------------------------------------------------------------------------
    # Tokenizing primitives
    # -------------------------------------------------------------------------

    @staticmethod
    def munch(buffer: Buffer) -> Sequence:
        """Remove and return the leading whitespace-delimited chunk, with the whitespace around it."""
        text = buffer.text
        n = len(text)
        i = 0
        while i < n and is_whitespace(text[i]):
            i += 1
        start = i
        while i < n and not is_whitespace(text[i]):
            i += 1
        chunk = text[start:i]
        while i < n and is_whitespace(text[i]):
            i += 1
        buffer.text = text[i:]
        return Sequence(chunk)

    @staticmethod
    def nibble(buffer: Buffer) -> Optional[Atom]:
        """Remove and return the leading non-whitespace symbol, or None if only whitespace remains."""
        text = buffer.text
        n = len(text)
        i = 0
        while i < n and is_whitespace(text[i]):
            i += 1
        if i == n:
            buffer.text = ""
            return None
        bite = Atom(text[i])
        i += 1
        while i < n and is_whitespace(text[i]):
            i += 1
        buffer.text = text[i:]
        return bite

    def lick(self, token: TokenLike) -> Sequence:
        """Copy of ``munch`` that leaves ``token`` untouched."""
        return self.munch(Buffer(token))

    def lick_atom(self, token: TokenLike) -> Optional[Atom]:
        """Copy of ``nibble`` that leaves ``token`` untouched."""
        return self.nibble(Buffer(token))

    def chunkify(self, source: Union[TokenLike, Buffer]) -> List[Sequence]:
        """
        Split text into whitespace-delimited chunks. A Buffer argument is
        consumed; any other token is copied first.
        """
        buffer = source if isinstance(source, Buffer) else Buffer(source)
        chunks = []
        while buffer:
            chunk = self.munch(buffer)
            if chunk:
                chunks.append(chunk)
        return chunks
