# amcore/core/charclasses.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
C-locale character classes over code points 0..255, computed once at import
and shared by every Language. Code points above 255 belong to no class.
"""

from types import MappingProxyType
from typing import Callable, FrozenSet, Mapping

from amcore.core.tokens import TokenLike, symbols

UCHAR_MAX = 0xFF

_CHARACTERS = [chr(code) for code in range(UCHAR_MAX + 1)]


def _members(predicate: Callable[[int], bool]) -> FrozenSet[str]:
    return frozenset(ch for ch in _CHARACTERS if predicate(ord(ch)))


def _is_upper(c: int) -> bool:
    return 0x41 <= c <= 0x5A


def _is_lower(c: int) -> bool:
    return 0x61 <= c <= 0x7A


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _is_alpha(c: int) -> bool:
    return _is_upper(c) or _is_lower(c)


def _is_graph(c: int) -> bool:
    return 0x21 <= c <= 0x7E


CONTROL = _members(lambda c: c < 0x20 or c == 0x7F)
PRINTABLE = _members(lambda c: 0x20 <= c <= 0x7E)
GRAPHIC = _members(_is_graph)
ALPHANUMERIC = _members(lambda c: _is_alpha(c) or _is_digit(c))
ALPHABETIC = _members(_is_alpha)
UPPER = _members(_is_upper)
LOWER = _members(_is_lower)
PUNCTUATION = _members(lambda c: _is_graph(c) and not (_is_alpha(c) or _is_digit(c)))
HEXADECIMAL = _members(lambda c: _is_digit(c) or 0x41 <= c <= 0x46 or 0x61 <= c <= 0x66)
DIGIT = _members(_is_digit)
SPACE = _members(lambda c: c in (0x20, 0x09, 0x0A, 0x0B, 0x0C, 0x0D))
BLANK = _members(lambda c: c in (0x20, 0x09))

# Registration order, general to specific. Evaluation is first-match, so the
# later (more specific) classes are shadowed by the earlier ones.
CHARACTER_CLASSES: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        "control": CONTROL,
        "printable": PRINTABLE,
        "graphic": GRAPHIC,
        "alphanumeric": ALPHANUMERIC,
        "alphabetical": ALPHABETIC,
        "upper": UPPER,
        "lower": LOWER,
        "punctuation": PUNCTUATION,
        "hexadecimal": HEXADECIMAL,
        "digit": DIGIT,
        "space": SPACE,
        "blank": BLANK,
    }
)

ALL_CLASSIFIED: FrozenSet[str] = frozenset().union(*CHARACTER_CLASSES.values())


def satisfies(members: FrozenSet[str], token: TokenLike) -> bool:
    """True iff every symbol of ``token`` belongs to ``members``. Vacuously true when empty."""
    return all(symbol in members for symbol in symbols(token))


def is_alphabetic(token: TokenLike) -> bool:
    return satisfies(ALPHABETIC, token)


def is_digits(token: TokenLike) -> bool:
    return satisfies(DIGIT, token)


def is_whitespace(symbol: str) -> bool:
    return symbol in SPACE
