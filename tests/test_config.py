# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from semver_grammar import ConfigError, SemverConfig, load_config
from semver_grammar.config import find_project_root


class TestFromPyproject:
    """Tests for SemverConfig.from_pyproject."""

    def test_reads_tool_table(self, temp_project: Path) -> None:
        """Test reading [tool.semver-grammar] and the project version."""
        config = SemverConfig.from_pyproject(temp_project)
        assert config.project_dir == temp_project
        assert config.version == "1.4.2-rc.1"
        assert config.build_aware is True
        assert config.default_pre_release == "alpha"

    def test_defaults(self, empty_project: Path) -> None:
        """Test defaults when the tool table is missing."""
        config = SemverConfig.from_pyproject(empty_project)
        assert config.version == ""
        assert config.build_aware is False
        assert config.default_pre_release == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SemverConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            SemverConfig.from_pyproject(tmp_path)


class TestFromPyprojectDict:
    """Tests for value validation."""

    def test_build_aware_must_be_bool(self) -> None:
        """Test that build_aware must be a boolean."""
        with pytest.raises(ConfigError, match="build_aware"):
            SemverConfig.from_pyproject_dict({"tool": {"semver-grammar": {"build_aware": "yes"}}})

    def test_default_pre_release_must_be_str(self) -> None:
        """Test that default_pre_release must be a string."""
        with pytest.raises(ConfigError, match="default_pre_release"):
            SemverConfig.from_pyproject_dict(
                {"tool": {"semver-grammar": {"default_pre_release": 1}}}
            )

    def test_tool_must_be_table(self) -> None:
        """Test that the tool entry must be a table."""
        with pytest.raises(ConfigError):
            SemverConfig.from_pyproject_dict({"tool": {"semver-grammar": "on"}})


class TestLoadConfig:
    """Tests for load_config and find_project_root."""

    def test_searches_parent_directories(self, temp_project: Path) -> None:
        """Test that pyproject.toml is found from a subdirectory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == temp_project.resolve()
        assert load_config(nested).build_aware is True

    def test_no_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that defaults are used when no pyproject.toml exists."""
        import semver_grammar.config as config_module

        monkeypatch.setattr(config_module, "find_project_root", lambda start_dir=None: None)
        config = load_config(tmp_path)
        assert config == SemverConfig()
