# SPDX-License-Identifier: MIT
"""Changelog updates for releases."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from .release import ReleasePlan

DEFAULT_TITLE = "# Changelog"


def render_entry(
    plan: ReleasePlan,
    changes: Iterable[str],
    release_date: Optional[date] = None,
) -> str:
    """Render the Markdown section for a release.

    Args:
        plan: The release being made
        changes: One line per change, usually commit subjects
        release_date: Date shown in the heading (defaults to today)

    Returns:
        The section text, ending with a blank line
    """
    release_date = release_date or date.today()
    lines = [f"## {plan.tag} - {release_date.isoformat()}", ""]

    bullets = [f"- {change.strip()}" for change in changes if change.strip()]
    lines.extend(bullets or ["- No changes recorded."])
    lines.append("")
    return "\n".join(lines) + "\n"


def prepend_entry(path: str | Path, entry: str) -> None:
    """Insert ``entry`` as the newest section of the changelog.

    The entry goes right after a leading ``# `` title line when there is one,
    otherwise at the top. A missing file is created with a default title.
    """
    changelog = Path(path)
    if not changelog.exists():
        changelog.write_text(f"{DEFAULT_TITLE}\n\n{entry}", encoding="utf-8")
        return

    existing = changelog.read_text(encoding="utf-8")
    first_line, _, rest = existing.partition("\n")
    if first_line.startswith("# "):
        content = f"{first_line}\n\n{entry}{rest.lstrip()}"
    else:
        content = f"{entry}{existing}"
    changelog.write_text(content, encoding="utf-8")
