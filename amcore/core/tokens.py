# amcore/core/tokens.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Token model shared by every Language: a token is either a single symbol
(``Atom``) or an ordered run of symbols (``Sequence``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class Atom:
    """A single symbol."""

    symbol: str

    def __post_init__(self) -> None:
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise ValueError(f"Atom requires exactly one symbol, got {self.symbol!r}")

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Sequence:
    """An ordered run of symbols. The empty sequence is the sentinel token."""

    text: str = ""

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return bool(self.text)


Token = Union[Atom, Sequence]
TokenLike = Union[Atom, Sequence, str]

EMPTY_TOKEN = Sequence("")


class Buffer:
    """
    Mutable program text consumed by the destructive tokenizing primitives.
    """

    def __init__(self, text: TokenLike = "") -> None:
        self.text = text_of(text)

    def __bool__(self) -> bool:
        return bool(self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Buffer({self.text!r})"

    def to_sequence(self) -> Sequence:
        return Sequence(self.text)


def to_token(value: TokenLike) -> Token:
    """Coerce plain text to a Sequence; tokens pass through unchanged."""
    if isinstance(value, (Atom, Sequence)):
        return value
    if isinstance(value, Buffer):
        return value.to_sequence()
    if isinstance(value, str):
        return Sequence(value)
    raise TypeError(f"Cannot build a token from {type(value).__name__}")


def text_of(token: TokenLike) -> str:
    """Return the symbols of either token case as one string."""
    if isinstance(token, Atom):
        return token.symbol
    if isinstance(token, Sequence):
        return token.text
    if isinstance(token, Buffer):
        return token.text
    if isinstance(token, str):
        return token
    raise TypeError(f"Not a token: {type(token).__name__}")


def symbols(token: TokenLike) -> Iterator[str]:
    """Yield each atomic symbol of ``token``."""
    yield from text_of(token)


def lower(token: Token) -> Token:
    """Case-fold a token, keeping its tag."""
    if isinstance(token, Atom):
        return Atom(token.symbol.lower())
    return Sequence(token.text.lower())
