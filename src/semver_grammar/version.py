# SPDX-License-Identifier: MIT
"""The Version value: a version core plus pre-release and build metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .metadata import ABSENT, Metadata, compare_metadata
from .normal import NormalVersion

PRE_RELEASE_PREFIX = "-"
BUILD_PREFIX = "+"


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """An immutable semantic version.

    Equality, hashing and the comparison operators consider the version core
    and the pre-release only. Use ``compare_with_builds`` for an order that
    also takes build metadata into account.

    Attributes:
        normal: The MAJOR.MINOR.PATCH core
        pre_release_metadata: Pre-release identifiers, or ABSENT
        build: Build metadata identifiers, or ABSENT
    """

    normal: NormalVersion
    pre_release_metadata: Metadata = field(default=ABSENT)
    build: Metadata = field(default=ABSENT)

    # -- construction -------------------------------------------------------

    @classmethod
    def for_integers(cls, major: int, minor: int = 0, patch: int = 0) -> Version:
        """Create a version from its numbers.

        Raises:
            ArgumentError: If a number is negative
        """
        return cls(NormalVersion(major, minor, patch))

    @classmethod
    def parse(cls, text: str) -> Version:
        """Create a version by parsing a full version string."""
        from .parser import parse

        return parse(text)

    value_of = parse

    @classmethod
    def from_components(
        cls,
        normal: NormalVersion,
        pre_release: Optional[Metadata] = None,
        build: Optional[Metadata] = None,
    ) -> Version:
        return cls(
            normal,
            ABSENT if pre_release is None else pre_release,
            ABSENT if build is None else build,
        )

    # -- accessors ----------------------------------------------------------

    @property
    def major(self) -> int:
        return self.normal.major

    @property
    def minor(self) -> int:
        return self.normal.minor

    @property
    def patch(self) -> int:
        return self.normal.patch

    @property
    def normal_version(self) -> str:
        """Return the version core as text, e.g. ``1.2.3``."""
        return str(self.normal)

    @property
    def pre_release(self) -> str:
        """Return the pre-release as text, or an empty string."""
        return str(self.pre_release_metadata)

    @property
    def build_metadata(self) -> str:
        """Return the build metadata as text, or an empty string."""
        return str(self.build)

    @property
    def is_prerelease(self) -> bool:
        return not self.pre_release_metadata.is_absent

    # -- derived versions ---------------------------------------------------

    def increment_major(self, pre_release: Optional[str] = None) -> Version:
        """Bump the major version, dropping pre-release and build metadata.

        Args:
            pre_release: Optional pre-release text to attach to the result
        """
        return self._with_core(self.normal.increment_major(), pre_release)

    def increment_minor(self, pre_release: Optional[str] = None) -> Version:
        return self._with_core(self.normal.increment_minor(), pre_release)

    def increment_patch(self, pre_release: Optional[str] = None) -> Version:
        return self._with_core(self.normal.increment_patch(), pre_release)

    def increment_pre_release(self) -> Version:
        """Increment the pre-release, e.g. ``beta.1`` -> ``beta.2``.

        Build metadata is not carried over.

        Raises:
            InvalidOperationError: If the version has no pre-release
        """
        return Version(self.normal, self.pre_release_metadata.increment())

    def increment_build_metadata(self) -> Version:
        """Increment the build metadata.

        Raises:
            InvalidOperationError: If the version has no build metadata
        """
        return Version(self.normal, self.pre_release_metadata, self.build.increment())

    def set_pre_release(self, pre_release: str) -> Version:
        """Replace the pre-release. Build metadata is not carried over."""
        from .parser import parse_pre_release

        return Version(self.normal, parse_pre_release(pre_release))

    def set_build_metadata(self, build: str) -> Version:
        """Replace the build metadata, keeping the pre-release."""
        from .parser import parse_build

        return Version(self.normal, self.pre_release_metadata, parse_build(build))

    def _with_core(self, normal: NormalVersion, pre_release: Optional[str]) -> Version:
        if pre_release is None:
            return Version(normal)
        from .parser import parse_pre_release

        return Version(normal, parse_pre_release(pre_release))

    # -- ordering -----------------------------------------------------------

    def compare(self, other: Version) -> int:
        """Compare by precedence, ignoring build metadata.

        A version without pre-release (a final release) has higher precedence
        than any pre-release of the same core.

        Returns:
            -1 if self < other
            0 if self == other
            1 if self > other
        """
        result = self.normal.compare(other.normal)
        if result != 0:
            return result
        mine = self.pre_release_metadata
        theirs = other.pre_release_metadata
        if mine.is_absent != theirs.is_absent:
            return 1 if mine.is_absent else -1
        return compare_metadata(mine, theirs)

    def compare_with_builds(self, other: Version) -> int:
        """Compare by precedence, then by build metadata.

        When exactly one side has no build metadata the metadata comparison
        is negated, so ``1.0.0+build.1`` sorts below ``1.0.0``.
        """
        result = self.compare(other)
        if result != 0:
            return result
        result = compare_metadata(self.build, other.build)
        if self.build.is_absent != other.build.is_absent:
            result = -result
        return result

    def greater_than(self, other: Version) -> bool:
        return self.compare(other) > 0

    def greater_than_or_equal_to(self, other: Version) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Version) -> bool:
        return self.compare(other) < 0

    def less_than_or_equal_to(self, other: Version) -> bool:
        return self.compare(other) <= 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.normal, self.pre_release_metadata))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # -- rendering ----------------------------------------------------------

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.normal_version
        if not self.pre_release_metadata.is_absent:
            version += PRE_RELEASE_PREFIX + self.pre_release
        if not self.build.is_absent:
            version += BUILD_PREFIX + self.build_metadata
        return version

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"
