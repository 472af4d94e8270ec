# SPDX-License-Identifier: MIT
"""Check that a string is a semantic version."""

from __future__ import annotations

import click

from ..main import echo_error, echo_info
from ..semver import InvalidVersionError, parse_version


@click.command()
@click.argument("version")
def validate(version: str) -> None:
    """Check that VERSION is a semantic version and print it.

    Exits with status 1 when it is not.
    """
    try:
        parsed = parse_version(version)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(parsed))
