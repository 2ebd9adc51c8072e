# SPDX-License-Identifier: MIT
"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

TOOL_TABLE = "semver-grammar"


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """Settings read from ``[tool.semver-grammar]`` in pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        version: The project's own version from ``[project].version``
        build_aware: Order by build metadata as well when sorting or comparing
        default_pre_release: Pre-release attached by ``semver bump`` when none
            is passed on the command line
    """

    project_dir: Optional[Path] = None
    version: str = ""
    build_aware: bool = False
    default_pre_release: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        logger.debug("Loaded configuration from %s", pyproject_path)
        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        build_aware = tool.get("build_aware", False)
        if not isinstance(build_aware, bool):
            raise ConfigError(f"[tool.{TOOL_TABLE}] build_aware must be a boolean")

        default_pre_release = tool.get("default_pre_release", "")
        if not isinstance(default_pre_release, str):
            raise ConfigError(f"[tool.{TOOL_TABLE}] default_pre_release must be a string")

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError("[project] version must be a string")

        return cls(
            project_dir=project_dir,
            version=version,
            build_aware=build_aware,
            default_pre_release=default_pre_release,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The project directory, or None if no pyproject.toml was found
    """
    current = Path(start_dir or Path.cwd()).resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load configuration for a project, falling back to defaults.

    Args:
        project_dir: Directory to search from (defaults to cwd)

    Raises:
        ConfigError: If pyproject.toml exists but is invalid
    """
    root = find_project_root(project_dir)
    if root is None:
        logger.debug("No pyproject.toml found, using default configuration")
        return SemverConfig()
    return SemverConfig.from_pyproject(root)
