# SPDX-License-Identifier: MIT
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from semtag.config import ConfigError, SemtagConfig, find_project_root, load_config


class TestSemtagConfig:
    """Tests for SemtagConfig."""

    def test_defaults_without_pyproject(self, tmp_path: Path) -> None:
        """Test that a missing pyproject.toml yields the defaults."""
        config = SemtagConfig.from_pyproject(tmp_path)
        assert config.project_dir == tmp_path
        assert config.version_file == ".semver"
        assert config.changelog == "CHANGELOG.md"
        assert config.tag_prefix == "v"
        assert config.remote == "origin"
        assert config.push is True
        assert config.strict is False
        assert config.version_path == tmp_path / ".semver"
        assert config.changelog_path == tmp_path / "CHANGELOG.md"

    def test_defaults_without_tool_table(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml without [tool.semtag] yields the defaults."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        config = SemtagConfig.from_pyproject(tmp_path)
        assert config.tag_prefix == "v"

    def test_reads_tool_table(self, tmp_path: Path) -> None:
        """Test loading every option from [tool.semtag]."""
        (tmp_path / "pyproject.toml").write_text(
            """[tool.semtag]
version_file = "VERSION"
changelog = "docs/CHANGES.md"
tag_prefix = "release-"
remote = "upstream"
push = false
strict = true
"""
        )
        config = SemtagConfig.from_pyproject(tmp_path)
        assert config.version_path == tmp_path / "VERSION"
        assert config.changelog_path == tmp_path / "docs" / "CHANGES.md"
        assert config.tag_prefix == "release-"
        assert config.remote == "upstream"
        assert config.push is False
        assert config.strict is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[tool.semtag\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            SemtagConfig.from_pyproject(tmp_path)

    @pytest.mark.parametrize(
        "table, message",
        [
            ({"push": "yes"}, "tool.semtag.push must be a bool"),
            ({"tag_prefix": 1}, "tool.semtag.tag_prefix must be a str"),
            ({"version_file": "  "}, "cannot be empty"),
            ({"prefix": "v"}, "Unknown"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, table: dict, message: str) -> None:
        """Test that wrongly typed or unknown options raise ConfigError."""
        with pytest.raises(ConfigError, match=message):
            SemtagConfig.from_pyproject_dict({"tool": {"semtag": table}}, tmp_path)

    def test_empty_tag_prefix_allowed(self, tmp_path: Path) -> None:
        config = SemtagConfig.from_pyproject_dict({"tool": {"semtag": {"tag_prefix": ""}}}, tmp_path)
        assert config.tag_prefix == ""


class TestFindProjectRoot:
    """Tests for find_project_root."""

    def test_finds_pyproject_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_finds_git_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "src"
        nested.mkdir()
        assert find_project_root(nested) == tmp_path.resolve()

    def test_load_config_uses_given_directory(self, temp_project: Path) -> None:
        config = load_config(temp_project)
        assert config.project_dir == temp_project
        assert config.push is False
