# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemtagConfig:
    """Configuration loaded from the ``[tool.semtag]`` table of pyproject.toml.

    Attributes:
        project_dir: Project root directory
        version_file: File holding the last tagged version
        changelog: Changelog file updated on release
        tag_prefix: Prefix for release tag names
        remote: Remote to push to
        push: Whether to push the commit and tags after tagging
        strict: Use strict SemVer precedence when comparing
    """

    project_dir: Path
    version_file: str = ".semver"
    changelog: str = "CHANGELOG.md"
    tag_prefix: str = "v"
    remote: str = "origin"
    push: bool = True
    strict: bool = False

    @property
    def version_path(self) -> Path:
        return self.project_dir / self.version_file

    @property
    def changelog_path(self) -> Path:
        return self.project_dir / self.changelog

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemtagConfig":
        """Load configuration from pyproject.toml.

        A missing pyproject.toml yields the defaults.

        Raises:
            ConfigError: If the file is invalid
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "SemtagConfig":
        """Create a SemtagConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a ``[tool.semtag]`` value has the wrong type
        """
        tool_semtag = pyproject.get("tool", {}).get("semtag", {})
        if not isinstance(tool_semtag, dict):
            raise ConfigError("[tool.semtag] must be a table")

        unknown = sorted(set(tool_semtag) - _FIELD_TYPES.keys())
        if unknown:
            raise ConfigError(f"Unknown [tool.semtag] option(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, expected in _FIELD_TYPES.items():
            if key not in tool_semtag:
                continue
            value = tool_semtag[key]
            if not isinstance(value, expected):
                raise ConfigError(
                    f"tool.semtag.{key} must be a {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[key] = value

        for key in ("version_file", "changelog"):
            if key in values and not values[key].strip():
                raise ConfigError(f"tool.semtag.{key} cannot be empty")

        return cls(project_dir=project_dir, **values)


_FIELD_TYPES: dict[str, type] = {
    "version_file": str,
    "changelog": str,
    "tag_prefix": str,
    "remote": str,
    "push": bool,
    "strict": bool,
}


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml or a .git directory.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The first directory containing either marker, or the start directory
        itself when none is found
    """
    start = (Path(start_dir) if start_dir else Path.cwd()).resolve()
    current = start

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        if (current / ".git").exists():
            return current
        current = current.parent

    return start


def load_config(project_dir: Optional[str | Path] = None) -> SemtagConfig:
    """Load configuration for the project.

    Args:
        project_dir: Project directory (defaults to finding the project root)

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
    return SemtagConfig.from_pyproject(project_dir)
