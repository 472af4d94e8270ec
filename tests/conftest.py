# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semtag tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project with pyproject.toml, a version file and a changelog."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "test-project"
version = "1.2.3"

[tool.semtag]
push = false
"""
    )
    (project_dir / ".semver").write_text("1.2.3\n")
    (project_dir / "CHANGELOG.md").write_text(
        "# Changelog\n\n## v1.2.3 - 2026-01-01\n\n- Initial release\n"
    )
    return project_dir
