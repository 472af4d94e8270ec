# SPDX-License-Identifier: MIT
"""Reading and writing the persisted version marker.

The marker is a single-line text file holding the last tagged version.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .semver import Version, parse_version


def read_version(path: str | Path) -> Optional[Version]:
    """Read the version recorded in the marker file.

    Args:
        path: Path to the marker file

    Returns:
        The recorded Version, or None if no version has been recorded yet

    Raises:
        InvalidVersionError: If the file holds something other than a version
    """
    marker = Path(path)
    if not marker.exists():
        return None

    content = marker.read_text(encoding="utf-8").strip()
    if not content:
        return None
    return parse_version(content)


def write_version(path: str | Path, version: Version) -> None:
    """Record ``version`` in the marker file, replacing its content."""
    Path(path).write_text(f"{version}\n", encoding="utf-8")
