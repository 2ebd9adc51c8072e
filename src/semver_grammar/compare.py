# SPDX-License-Identifier: MIT
"""Version comparison and sorting helpers.

Precedence follows the version grammar's ordering: numeric pre-release
identifiers compare as integers, alphanumeric ones in ASCII order, and a
final release sorts above its pre-releases. Build metadata is ignored unless
a build-aware helper is used.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Union

from .parser import parse
from .version import Version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        GrammarError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build", "1.0.0")
        0
    """
    return _coerce(version1).compare(_coerce(version2))


def compare_with_builds(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions, breaking ties on build metadata.

    Examples:
        >>> compare_with_builds("1.0.0+build.1", "1.0.0+build.2")
        -1
    """
    return _coerce(version1).compare_with_builds(_coerce(version2))


_precedence = cmp_to_key(Version.compare)
_build_precedence = cmp_to_key(Version.compare_with_builds)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, ignoring build metadata.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _precedence(_coerce(version))


def build_aware_key(version: VersionLike) -> Any:
    """Return a sort key for a version that also orders build metadata."""
    return _build_precedence(_coerce(version))


def sort_versions(
    versions: Iterable[VersionLike],
    build_aware: bool = False,
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions.

    The sort is stable, so versions of equal precedence keep their input order.
    """
    key = build_aware_key if build_aware else version_key
    return sorted((_coerce(v) for v in versions), key=key, reverse=reverse)


def max_version(versions: Iterable[VersionLike], build_aware: bool = False) -> Version:
    """Return the highest version.

    Raises:
        ValueError: If versions is empty
    """
    key = build_aware_key if build_aware else version_key
    return max((_coerce(v) for v in versions), key=key)
