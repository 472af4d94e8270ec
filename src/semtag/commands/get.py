# SPDX-License-Identifier: MIT
"""Show the recorded version."""

from __future__ import annotations

from typing import Optional

import click

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context
from ..semver import InvalidVersionError
from ..version_file import read_version

PARTS = ["major", "minor", "patch", "prerel", "build"]


@click.command()
@click.option(
    "--part",
    "-p",
    type=click.Choice(PARTS),
    help="Print only one part of the version.",
)
@pass_context
def get(ctx: Context, part: Optional[str]) -> None:
    """Print the version recorded in the project's version file.

    An absent pre-release or build part prints an empty line.
    """
    try:
        config = ctx.load_config()
        current = read_version(config.version_path)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if current is None:
        echo_error(f"No version recorded in {config.version_path}")
        raise SystemExit(1)

    if part is None:
        echo_info(str(current))
    elif part == "prerel":
        echo_info(current.prerelease or "")
    elif part == "build":
        echo_info(current.build or "")
    else:
        echo_info(str(getattr(current, part)))
