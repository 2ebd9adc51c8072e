# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing and manipulating versions."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from .chartype import CharType, classify


class ErrorKind(str, Enum):
    """Machine readable category of a SemverError."""

    ARGUMENT = "argument"
    GRAMMAR = "grammar"
    UNEXPECTED_CHARACTER = "unexpected_character"
    INVALID_OPERATION = "invalid_operation"


class SemverError(Exception):
    """Base class for all errors raised by semver_grammar."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ArgumentError(SemverError, ValueError):
    """Raised for a missing or empty input string, or a negative number."""

    kind = ErrorKind.ARGUMENT


class GrammarError(SemverError):
    """Raised when the input violates the version grammar.

    Attributes:
        text: The input being parsed, if known
    """

    kind = ErrorKind.GRAMMAR

    def __init__(self, message: str, text: Optional[str] = None):
        self.text = text
        super().__init__(message)

    def __str__(self) -> str:
        if self.text is None:
            return self.message
        return f"{self.message} in {self.text!r}"


class UnexpectedCharacterError(GrammarError):
    """Raised when a character is not allowed at its position.

    Attributes:
        character: The offending character, or None at end of input
        offset: Zero-based offset of the character
        expected: Character classes that would have been accepted
    """

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(
        self,
        character: Optional[str],
        offset: int,
        expected: Iterable[CharType] = (),
        text: Optional[str] = None,
    ):
        self.character = character
        self.offset = offset
        self.expected = frozenset(expected)
        super().__init__(self._describe(), text)

    @property
    def char_type(self) -> CharType:
        """Return the class of the offending character."""
        return classify(self.character)

    def _describe(self) -> str:
        if self.character is None:
            found = "end of input"
        else:
            found = f"{self.char_type}({self.character!r})"
        message = f"Unexpected {found} at position {self.offset}"
        if self.expected:
            names = ", ".join(sorted(str(t) for t in self.expected))
            message += f", expecting one of [{names}]"
        return message


class InvalidOperationError(SemverError):
    """Raised when an operation is not defined for a value, e.g. incrementing
    absent metadata."""

    kind = ErrorKind.INVALID_OPERATION
