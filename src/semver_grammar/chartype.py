# SPDX-License-Identifier: MIT
"""Character classes of the version grammar.

Every character maps to exactly one class. The end-of-input marker (``None``)
is the only value classified as EOI.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class CharType(Enum):
    """Classes of characters recognised by the version grammar."""

    DIGIT = "digit"
    LETTER = "letter"
    DOT = "dot"
    HYPHEN = "hyphen"
    PLUS = "plus"
    EOI = "end of input"
    ILLEGAL = "illegal"

    def matches(self, char: Optional[str]) -> bool:
        """Return True if the character belongs to this class."""
        return classify(char) is self

    def __str__(self) -> str:
        return self.name


_PUNCTUATION = {
    ".": CharType.DOT,
    "-": CharType.HYPHEN,
    "+": CharType.PLUS,
}


def classify(char: Optional[str]) -> CharType:
    """Map a single character to its grammar class.

    Args:
        char: A one-character string, or None for end of input

    Returns:
        The CharType of the character

    Examples:
        >>> classify("7")
        <CharType.DIGIT: 'digit'>
        >>> classify(None)
        <CharType.EOI: 'end of input'>
        >>> classify("$")
        <CharType.ILLEGAL: 'illegal'>
    """
    if char is None:
        return CharType.EOI
    if "0" <= char <= "9":
        return CharType.DIGIT
    if "a" <= char <= "z" or "A" <= char <= "Z":
        return CharType.LETTER
    return _PUNCTUATION.get(char, CharType.ILLEGAL)


def matches_any(char: Optional[str], types: tuple[CharType, ...]) -> bool:
    """Return True if the character belongs to any of the given classes."""
    return classify(char) in types
