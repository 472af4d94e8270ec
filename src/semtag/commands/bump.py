# SPDX-License-Identifier: MIT
"""Bump a version, and release it when no version is given."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..bump import BumpDirective, BumpError, bump_version
from ..changelog import prepend_entry, render_entry
from ..config import ConfigError, SemtagConfig
from ..git import GitError, GitRepository
from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
)
from ..release import ReleasePlan, plan_release
from ..semver import InvalidVersionError, parse_version
from ..version_file import read_version, write_version

UNITS = ["major", "minor", "patch", "prerel", "prerelease", "build"]
LABELLED_UNITS = ("prerel", "prerelease", "build")


def _split_args(unit: str, args: tuple[str, ...]) -> tuple[Optional[str], Optional[str]]:
    """Split the positional arguments after the unit into (label, version).

    Raises:
        click.UsageError: If the number of arguments does not fit the unit
    """
    if unit in LABELLED_UNITS:
        if not 1 <= len(args) <= 2:
            raise click.UsageError(f"'bump {unit}' takes a LABEL and an optional VERSION")
        return args[0], args[1] if len(args) == 2 else None

    if len(args) > 1:
        raise click.UsageError(f"'bump {unit}' takes at most one VERSION")
    return None, args[0] if args else None


def _snapshot(path: Path) -> Optional[str]:
    return path.read_text(encoding="utf-8") if path.exists() else None


def _restore(path: Path, content: Optional[str]) -> None:
    if content is None:
        path.unlink(missing_ok=True)
    else:
        path.write_text(content, encoding="utf-8")


def _rollback(
    repo: GitRepository,
    config: SemtagConfig,
    saved: dict[Path, Optional[str]],
    committed: bool,
) -> None:
    """Put the version file, changelog and index back as they were."""
    try:
        if committed:
            repo.undo_commit()
        repo.unstage(config.version_file, config.changelog)
    except GitError as e:
        echo_warning(f"Could not fully roll back the release commit: {e}")
    for path, content in saved.items():
        _restore(path, content)


def _release(
    ctx: Context,
    config: SemtagConfig,
    plan: ReleasePlan,
    push: bool,
    assume_yes: bool,
    allow_dirty: bool,
) -> None:
    """Record, commit, tag and optionally push a planned release.

    Nothing is left behind when adding, committing or tagging fails: the
    release commit is dropped and both files get their previous content back.
    """
    repo = ctx.repository()

    if not allow_dirty and not repo.is_clean():
        echo_error("Working tree has uncommitted changes (use --allow-dirty to release anyway)")
        raise SystemExit(1)

    existing_tags = repo.tags(config.tag_prefix)
    if plan.tag in existing_tags:
        echo_error(f"Tag {plan.tag} already exists")
        raise SystemExit(1)

    if not assume_yes and not click.confirm(f"Tag release {plan.tag}?", default=False):
        echo_warning("Release cancelled, nothing was changed.")
        raise SystemExit(1)

    if plan.previous_tag in existing_tags:
        since = plan.previous_tag
    else:
        since = repo.latest_tag(config.tag_prefix)
    changes = repo.log_subjects(since)

    saved = {path: _snapshot(path) for path in (config.version_path, config.changelog_path)}
    write_version(config.version_path, plan.version)
    prepend_entry(config.changelog_path, render_entry(plan, changes))

    committed = False
    try:
        repo.add(config.version_file, config.changelog)
        repo.commit(plan.message)
        committed = True
        repo.tag(plan.tag, plan.message)
    except GitError:
        _rollback(repo, config, saved, committed)
        raise
    echo_success(f"Tagged {plan.tag}")

    if push:
        repo.push(config.remote)
        repo.push(config.remote, plan.tag)
        echo_success(f"Pushed {plan.tag} to {config.remote}")


@click.command()
@click.argument("unit", type=click.Choice(UNITS, case_sensitive=False))
@click.argument("args", nargs=-1, metavar="[LABEL] [VERSION]")
@click.option(
    "--yes",
    "-y",
    "assume_yes",
    is_flag=True,
    help="Release without asking for confirmation.",
)
@click.option(
    "--push/--no-push",
    default=None,
    help="Push the release commit and tag (defaults to tool.semtag.push).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the release that would be made without changing anything.",
)
@click.option(
    "--allow-dirty",
    is_flag=True,
    help="Release even if the working tree has uncommitted changes.",
)
@pass_context
def bump(
    ctx: Context,
    unit: str,
    args: tuple[str, ...],
    assume_yes: bool,
    push: Optional[bool],
    dry_run: bool,
    allow_dirty: bool,
) -> None:
    """Bump a version.

    UNIT is one of major, minor, patch, prerel or build. prerel and build
    take a LABEL. With a VERSION, the bumped version is printed and nothing
    else happens. Without one, the version recorded in the project's version
    file is bumped and released: the file and changelog are updated,
    committed and tagged after confirmation.

    \b
    Examples:
        semtag bump patch 0.1.0                       # 0.1.1
        semtag bump major 0.2.1                       # 1.0.0
        semtag bump prerel rc1.1.0 1.0.1              # 1.0.1-rc1.1.0
        semtag bump build build.051 1.0.1-rc1.1.0     # 1.0.1-rc1.1.0+build.051
        semtag bump minor                             # release next minor version
    """
    unit = unit.lower()
    label, version = _split_args(unit, args)

    try:
        directive = BumpDirective.from_unit(unit, label)
    except BumpError as e:
        raise click.UsageError(str(e)) from e

    if version is not None:
        try:
            echo_info(str(bump_version(parse_version(version), directive)))
        except InvalidVersionError as e:
            echo_error(str(e))
            raise SystemExit(1)
        return

    try:
        config = ctx.load_config()
        current = read_version(config.version_path)
        plan = plan_release(current, directive, tag_prefix=config.tag_prefix)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if current is None:
        echo_warning(f"No version recorded in {config.version_file}, starting from 0.0.0")
    echo_info(str(plan.version))

    if dry_run:
        echo_info(f"Would record {plan.version} in {config.version_file}, update {config.changelog}")
        echo_info(f"Would commit and tag {plan.tag}: {plan.message}")
        return

    try:
        _release(
            ctx,
            config,
            plan,
            push=config.push if push is None else push,
            assume_yes=assume_yes,
            allow_dirty=allow_dirty,
        )
    except GitError as e:
        echo_error(str(e))
        raise SystemExit(1)
