# SPDX-License-Identifier: MIT
"""Pre-release and build metadata.

Metadata is either ``ABSENT`` (no pre-release / no build metadata) or a
``MetadataVersion`` holding one or more dot separated identifiers. The same
ordering is used for pre-release and build metadata:

- identifiers are compared pairwise, left to right
- two numeric identifiers compare as integers, anything else in ASCII order
- if all compared identifiers are equal, the shorter sequence is lower
- ``ABSENT`` is lower than any concrete metadata
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from .errors import ArgumentError, InvalidOperationError

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


def is_numeric(identifier: str) -> bool:
    """Return True if the identifier consists of ASCII digits only."""
    return identifier.isascii() and identifier.isdigit()


class _MetadataBase:
    """Comparison and hashing shared by both metadata variants."""

    __slots__ = ()

    identifiers: tuple[str, ...]

    @property
    def is_absent(self) -> bool:
        return False

    def compare(self, other: Metadata) -> int:
        return compare_metadata(self, other)

    def increment(self) -> MetadataVersion:
        return increment_metadata(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _MetadataBase):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash(tuple(int(i) if is_numeric(i) else i for i in self.identifiers))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, _MetadataBase):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, _MetadataBase):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, _MetadataBase):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, _MetadataBase):
            return NotImplemented
        return self.compare(other) >= 0


@dataclass(frozen=True, slots=True, eq=False)
class Absent(_MetadataBase):
    """Marker for missing pre-release or build metadata."""

    @property
    def identifiers(self) -> tuple[str, ...]:
        return ()

    @property
    def is_absent(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True, slots=True, eq=False)
class MetadataVersion(_MetadataBase):
    """A non-empty sequence of pre-release or build identifiers.

    Attributes:
        identifiers: The dot separated identifiers, in order
    """

    identifiers: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.identifiers, str):
            raise ArgumentError("Identifiers must be a sequence of strings, not a string")
        identifiers = tuple(self.identifiers)
        if not identifiers:
            raise ArgumentError("Metadata must contain at least one identifier")
        for index, identifier in enumerate(identifiers):
            if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.fullmatch(identifier):
                raise ArgumentError(f"Invalid identifier {identifier!r} at index {index}")
        object.__setattr__(self, "identifiers", identifiers)

    @classmethod
    def of(cls, *identifiers: str) -> MetadataVersion:
        """Create metadata from identifiers, e.g. ``MetadataVersion.of("rc", "1")``."""
        return cls(identifiers)

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __repr__(self) -> str:
        return f"MetadataVersion({str(self)!r})"


Metadata = Union[Absent, MetadataVersion]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_identifiers(left: str, right: str) -> int:
    if is_numeric(left) and is_numeric(right):
        return _sign(int(left) - int(right))
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_metadata(first: Metadata, second: Metadata) -> int:
    """Compare two metadata values.

    Returns:
        -1 if first < second
        0 if first == second
        1 if first > second

    Examples:
        >>> from semver_grammar import parse_pre_release
        >>> compare_metadata(parse_pre_release("beta.2"), parse_pre_release("beta.11"))
        -1
        >>> compare_metadata(ABSENT, parse_pre_release("alpha"))
        -1
    """
    if first.is_absent and second.is_absent:
        return 0
    if first.is_absent:
        return -1
    if second.is_absent:
        return 1

    for left, right in zip(first.identifiers, second.identifiers):
        result = _compare_identifiers(left, right)
        if result != 0:
            return result
    return _sign(len(first.identifiers) - len(second.identifiers))


def increment_metadata(metadata: Metadata) -> MetadataVersion:
    """Return the next metadata value.

    A numeric last identifier is increased by one, otherwise the identifier
    ``1`` is appended.

    Raises:
        InvalidOperationError: If metadata is ABSENT
    """
    if metadata.is_absent:
        raise InvalidOperationError("Absent metadata cannot be incremented")

    *head, last = metadata.identifiers
    if is_numeric(last):
        return MetadataVersion((*head, str(int(last) + 1)))
    return MetadataVersion((*metadata.identifiers, "1"))
