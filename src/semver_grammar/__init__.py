# SPDX-License-Identifier: MIT
"""Grammar driven semantic version parsing and ordering.

Versions are parsed by a recursive descent parser into immutable values made
of a MAJOR.MINOR.PATCH core, optional pre-release identifiers and optional
build metadata. Ordering follows semantic versioning precedence, with an
additional build-aware order for release tooling.

Example:
    >>> from semver_grammar import parse, compare_versions, is_valid_semver
    >>>
    >>> version = parse("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release
    'alpha.1'
    >>> str(version.increment_pre_release())
    '1.2.3-alpha.2'
    >>>
    >>> is_valid_semver("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .chartype import CharType, classify
from .errors import (
    ArgumentError,
    ErrorKind,
    GrammarError,
    InvalidOperationError,
    SemverError,
    UnexpectedCharacterError,
)
from .metadata import (
    ABSENT,
    Absent,
    Metadata,
    MetadataVersion,
    compare_metadata,
    increment_metadata,
)
from .normal import NormalVersion
from .stream import CharacterStream, UnexpectedElementError
from .version import Version
from .parser import (
    ParseResult,
    VersionParser,
    is_valid_semver,
    parse,
    parse_build,
    parse_pre_release,
    parse_version_core,
    try_parse,
    try_parse_build,
    try_parse_pre_release,
    try_parse_version_core,
)
from .compare import (
    build_aware_key,
    compare_versions,
    compare_with_builds,
    max_version,
    sort_versions,
    version_key,
)
from .config import ConfigError, SemverConfig, load_config

__all__ = [
    # Values
    "Version",
    "NormalVersion",
    "MetadataVersion",
    "Metadata",
    "Absent",
    "ABSENT",
    "compare_metadata",
    "increment_metadata",
    # Parsing
    "CharType",
    "classify",
    "CharacterStream",
    "UnexpectedElementError",
    "VersionParser",
    "parse",
    "parse_version_core",
    "parse_pre_release",
    "parse_build",
    "try_parse",
    "try_parse_version_core",
    "try_parse_pre_release",
    "try_parse_build",
    "ParseResult",
    "is_valid_semver",
    # Comparison
    "compare_versions",
    "compare_with_builds",
    "version_key",
    "build_aware_key",
    "sort_versions",
    "max_version",
    # Errors
    "SemverError",
    "ArgumentError",
    "GrammarError",
    "UnexpectedCharacterError",
    "InvalidOperationError",
    "ErrorKind",
    # Configuration
    "SemverConfig",
    "ConfigError",
    "load_config",
]
