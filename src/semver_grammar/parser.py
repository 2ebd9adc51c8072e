# SPDX-License-Identifier: MIT
"""Recursive descent parser for semantic versions.

Grammar::

    valid-version   ::= version-core ["-" pre-release] ["+" build]
    version-core    ::= numeric-id "." numeric-id "." numeric-id
    numeric-id      ::= "0" | digit-not-zero digit*
    pre-release     ::= pre-id ("." pre-id)*
    pre-id          ::= alphanumeric-id | numeric-id
    build           ::= build-id ("." build-id)*
    build-id        ::= alphanumeric-id | digit+
    alphanumeric-id ::= (digit | letter | hyphen)+ with a letter or hyphen

Whether an identifier is alphanumeric or numeric is decided by looking ahead
to the next identifier boundary for a letter or hyphen. Leading zeros are
rejected only in the version core.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .chartype import CharType
from .errors import (
    ArgumentError,
    GrammarError,
    SemverError,
    UnexpectedCharacterError,
)
from .metadata import MetadataVersion
from .normal import NormalVersion
from .stream import CharacterStream, UnexpectedElementError
from .version import Version

logger = logging.getLogger(__name__)

DIGIT = CharType.DIGIT
LETTER = CharType.LETTER
DOT = CharType.DOT
HYPHEN = CharType.HYPHEN
PLUS = CharType.PLUS
EOI = CharType.EOI

_IDENTIFIER_CHARS = (DIGIT, LETTER, HYPHEN)

T = TypeVar("T")


class VersionParser:
    """Parser over a single input string.

    A parser instance owns its character stream and is meant to be used for
    one parse. The static ``parse_*`` methods create a parser per call.

    Raises:
        ArgumentError: If the input is None, not a string, or empty
    """

    def __init__(self, text: Any):
        if not isinstance(text, str) or not text:
            raise ArgumentError("Input string is None or empty")
        self.text: str = text
        self._chars = CharacterStream(text)

    # -- entry points -------------------------------------------------------

    @staticmethod
    def parse_valid_semver(text: str) -> Version:
        """Parse a complete ``MAJOR.MINOR.PATCH[-pre][+build]`` version."""
        return VersionParser(text)._run(VersionParser._valid_semver)

    @staticmethod
    def parse_version_core(text: str) -> NormalVersion:
        """Parse a ``MAJOR.MINOR.PATCH`` version core."""
        return VersionParser(text)._run(VersionParser._version_core)

    @staticmethod
    def parse_pre_release(text: str) -> MetadataVersion:
        """Parse pre-release identifiers, e.g. ``alpha.1``."""
        return VersionParser(text)._run(VersionParser._pre_release)

    @staticmethod
    def parse_build(text: str) -> MetadataVersion:
        """Parse build metadata identifiers, e.g. ``build.20240101``."""
        return VersionParser(text)._run(VersionParser._build)

    def _run(self, rule: Callable[[VersionParser], T]) -> T:
        try:
            result = rule(self)
            self._consume(EOI)
        except GrammarError as e:
            if e.text is None:
                e.text = self.text
            logger.debug("Rejected %r: %s", self.text, e.message)
            raise
        logger.debug("Parsed %r as %r", self.text, result)
        return result

    # -- grammar rules ------------------------------------------------------

    def _valid_semver(self) -> Version:
        normal = self._version_core()
        pre_release = None
        build = None

        next_char = self._consume(HYPHEN, PLUS, EOI)
        if HYPHEN.matches(next_char):
            pre_release = self._pre_release()
            next_char = self._consume(PLUS, EOI)
            if PLUS.matches(next_char):
                build = self._build()
        elif PLUS.matches(next_char):
            build = self._build()

        return Version.from_components(normal, pre_release, build)

    def _version_core(self) -> NormalVersion:
        major = int(self._numeric_identifier())
        self._consume(DOT)
        minor = int(self._numeric_identifier())
        self._consume(DOT)
        patch = int(self._numeric_identifier())
        return NormalVersion(major, minor, patch)

    def _pre_release(self) -> MetadataVersion:
        self._ensure_look_ahead(*_IDENTIFIER_CHARS)
        identifiers = [self._pre_release_identifier()]
        while self._chars.positive_look_ahead(DOT):
            self._consume(DOT)
            identifiers.append(self._pre_release_identifier())
        return MetadataVersion(tuple(identifiers))

    def _pre_release_identifier(self) -> str:
        self._check_for_empty_identifier()
        boundary = self._nearest_char_type(DOT, PLUS, EOI)
        if self._chars.positive_look_ahead_before(boundary, LETTER, HYPHEN):
            return self._alphanumeric_identifier()
        return self._digits()

    def _build(self) -> MetadataVersion:
        self._ensure_look_ahead(*_IDENTIFIER_CHARS)
        identifiers = [self._build_identifier()]
        while self._chars.positive_look_ahead(DOT):
            self._consume(DOT)
            identifiers.append(self._build_identifier())
        return MetadataVersion(tuple(identifiers))

    def _build_identifier(self) -> str:
        self._check_for_empty_identifier()
        boundary = self._nearest_char_type(DOT, EOI)
        if self._chars.positive_look_ahead_before(boundary, LETTER, HYPHEN):
            return self._alphanumeric_identifier()
        return self._digits()

    def _numeric_identifier(self) -> str:
        self._check_for_leading_zeroes()
        return self._digits()

    def _alphanumeric_identifier(self) -> str:
        chars = [self._consume(*_IDENTIFIER_CHARS)]
        while self._chars.positive_look_ahead(*_IDENTIFIER_CHARS):
            chars.append(self._consume(*_IDENTIFIER_CHARS))
        return "".join(chars)  # type: ignore[arg-type]

    def _digits(self) -> str:
        chars = [self._consume(DIGIT)]
        while self._chars.positive_look_ahead(DIGIT):
            chars.append(self._consume(DIGIT))
        return "".join(chars)  # type: ignore[arg-type]

    # -- helpers ------------------------------------------------------------

    def _nearest_char_type(self, *types: CharType) -> CharType:
        """Return the first of ``types`` found in the unconsumed input."""
        for char in self._chars:
            for char_type in types:
                if char_type.matches(char):
                    return char_type
        return EOI

    def _check_for_leading_zeroes(self) -> None:
        first = self._chars.look_ahead(1)
        second = self._chars.look_ahead(2)
        if first == "0" and DIGIT.matches(second):
            raise GrammarError(
                f"Numeric identifier must not contain leading zeroes "
                f"(position {self._chars.offset})"
            )

    def _check_for_empty_identifier(self) -> None:
        lookahead = self._chars.look_ahead()
        if DOT.matches(lookahead) or PLUS.matches(lookahead) or EOI.matches(lookahead):
            cause = UnexpectedCharacterError(
                lookahead, self._chars.offset, _IDENTIFIER_CHARS, self.text
            )
            raise GrammarError(
                f"Identifiers must not be empty (position {self._chars.offset})"
            ) from cause

    def _consume(self, *expected: CharType) -> Optional[str]:
        try:
            return self._chars.consume(*expected)
        except UnexpectedElementError as e:
            raise UnexpectedCharacterError(e.element, e.position, e.expected) from e

    def _ensure_look_ahead(self, *expected: CharType) -> None:
        if not self._chars.positive_look_ahead(*expected):
            raise UnexpectedCharacterError(
                self._chars.look_ahead(), self._chars.offset, expected
            )


def parse(text: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        text: A string of the form MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        ArgumentError: If text is None or empty
        GrammarError: If text does not follow the version grammar
        UnexpectedCharacterError: If a specific character is not allowed

    Examples:
        >>> str(parse("1.0.0-alpha.1+build.456"))
        '1.0.0-alpha.1+build.456'
        >>> parse("2.0.0-rc.1").pre_release
        'rc.1'
    """
    return VersionParser.parse_valid_semver(text)


def parse_version_core(text: str) -> NormalVersion:
    """Parse only a version core such as ``1.2.3``."""
    return VersionParser.parse_version_core(text)


def parse_pre_release(text: str) -> MetadataVersion:
    """Parse only pre-release identifiers such as ``beta.2``."""
    return VersionParser.parse_pre_release(text)


def parse_build(text: str) -> MetadataVersion:
    """Parse only build metadata such as ``exp.sha.5114f85``."""
    return VersionParser.parse_build(text)


def is_valid_semver(text: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    return try_parse(text).ok


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Outcome of a ``try_parse*`` call.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: Optional[T] = None
    error: Optional[SemverError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the parsed value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _attempt(parse_func: Callable[[str], T], text: str) -> ParseResult[T]:
    try:
        return ParseResult(value=parse_func(text))
    except (ArgumentError, GrammarError) as e:
        return ParseResult(error=e)


def try_parse(text: str) -> ParseResult[Version]:
    """Parse a full version without raising on invalid input.

    Examples:
        >>> result = try_parse("1.0.0-")
        >>> result.ok, result.error.kind.value
        (False, 'unexpected_character')
    """
    return _attempt(parse, text)


def try_parse_version_core(text: str) -> ParseResult[NormalVersion]:
    return _attempt(parse_version_core, text)


def try_parse_pre_release(text: str) -> ParseResult[MetadataVersion]:
    return _attempt(parse_pre_release, text)


def try_parse_build(text: str) -> ParseResult[MetadataVersion]:
    return _attempt(parse_build, text)
