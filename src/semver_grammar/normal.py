# SPDX-License-Identifier: MIT
"""The version core: MAJOR.MINOR.PATCH."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ArgumentError


@dataclass(frozen=True, slots=True, order=True)
class NormalVersion:
    """An immutable major.minor.patch triple.

    Ordering is lexicographic over (major, minor, patch).

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ArgumentError(
                    f"{name.capitalize()} version must be an integer, "
                    f"got {type(value).__name__}"
                )
            if value < 0:
                raise ArgumentError(
                    "Major, minor and patch versions must be non-negative integers"
                )

    def increment_major(self) -> NormalVersion:
        return NormalVersion(self.major + 1, 0, 0)

    def increment_minor(self) -> NormalVersion:
        return NormalVersion(self.major, self.minor + 1, 0)

    def increment_patch(self) -> NormalVersion:
        return NormalVersion(self.major, self.minor, self.patch + 1)

    def compare(self, other: NormalVersion) -> int:
        """Return -1, 0 or 1 as this core is lower, equal or higher."""
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
