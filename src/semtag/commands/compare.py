# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

from typing import Optional

import click

from ..compare import compare_versions
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context
from ..semver import InvalidVersionError


@click.command()
@click.argument("version")
@click.argument("other_version")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Use SemVer 2.0.0 pre-release precedence (defaults to tool.semtag.strict).",
)
@pass_context
def compare(ctx: Context, version: str, other_version: str, strict: Optional[bool]) -> None:
    """Compare VERSION with OTHER_VERSION.

    Prints -1 if OTHER_VERSION is newer, 0 if both are equal and 1 if
    OTHER_VERSION is older. Build metadata is ignored.

    \b
    Examples:
        semtag compare 10.1.4-rc4 10.4.2-rc1                     # -1
        semtag compare 1.0.1-rc1.1.0+build.051 1.0.1-rc1.1.0     # 0
        semtag compare 1.0.1-rc1.1.0+build.051 1.0.1-rb1.1.0     # 1
    """
    try:
        if strict is None:
            strict = ctx.load_config().strict
        result = compare_versions(version, other_version, strict=strict)
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
