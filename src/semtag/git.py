# SPDX-License-Identifier: MIT
"""Thin wrapper around the git command line."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Optional

from .compare import max_version
from .semver import is_valid_semver


class GitError(Exception):
    """Raised when a git command fails."""

    pass


class GitRepository:
    """Runs git commands inside a working tree.

    Args:
        path: Working tree directory
        log: Called with each command line before it runs
    """

    def __init__(self, path: str | Path, log: Optional[Callable[[str], None]] = None) -> None:
        self.path = Path(path)
        self._log = log

    def run(self, *args: str) -> str:
        """Run ``git <args>`` and return its standard output.

        Raises:
            GitError: If git is missing or exits with a non-zero status
        """
        cmd = ["git", *args]
        if self._log is not None:
            self._log(" ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                cwd=self.path,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise GitError("git executable not found") from None

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            raise GitError(f"'{' '.join(cmd)}' failed: {detail}")
        return result.stdout

    def is_clean(self) -> bool:
        """Return True if the working tree has no uncommitted changes."""
        return not self.run("status", "--porcelain").strip()

    def tags(self, prefix: str = "") -> list[str]:
        """List tag names starting with ``prefix``."""
        output = self.run("tag", "--list", f"{prefix}*")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def latest_tag(self, prefix: str = "v", *, strict: bool = True) -> Optional[str]:
        """Return the tag naming the newest version, or None if there is none.

        Tags whose remainder after ``prefix`` is not a semantic version are
        ignored. Versions are ranked with SemVer precedence by default, so
        ``v1.0.0`` is newer than ``v1.0.0-rc1``.
        """
        by_version = {}
        for tag in self.tags(prefix):
            remainder = tag[len(prefix) :]
            if is_valid_semver(remainder):
                by_version[remainder] = tag
        if not by_version:
            return None
        return by_version[str(max_version(by_version, strict=strict))]

    def log_subjects(self, since: Optional[str] = None) -> list[str]:
        """Return commit subjects from ``since`` (exclusive) to HEAD, newest first."""
        revision = f"{since}..HEAD" if since else "HEAD"
        output = self.run("log", "--pretty=format:%s", revision)
        return [line for line in output.splitlines() if line.strip()]

    def add(self, *paths: str | Path) -> None:
        self.run("add", "--", *(str(p) for p in paths))

    def commit(self, message: str) -> None:
        self.run("commit", "-m", message)

    def tag(self, name: str, message: str) -> None:
        """Create an annotated tag on HEAD."""
        self.run("tag", "-a", name, "-m", message)

    def unstage(self, *paths: str | Path) -> None:
        self.run("reset", "-q", "--", *(str(p) for p in paths))

    def undo_commit(self) -> None:
        """Drop the last commit, keeping its changes staged."""
        self.run("reset", "-q", "--soft", "HEAD~1")

    def push(self, remote: str, ref: Optional[str] = None) -> None:
        """Push the current branch, or ``ref`` when given, to ``remote``."""
        if ref is None:
            self.run("push", remote)
        else:
            self.run("push", remote, ref)
