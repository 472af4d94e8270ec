# SPDX-License-Identifier: MIT
"""CLI entry point for the semtag command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .bump import BumpError
from .config import ConfigError, SemtagConfig, load_config
from .git import GitError, GitRepository
from .semver import InvalidVersionError


class Context:
    """Per-invocation state shared by the semtag subcommands.

    Holds the global options and lazily loads the project configuration the
    first time a command needs it.
    """

    def __init__(self) -> None:
        self.config: Optional[SemtagConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemtagConfig:
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def repository(self) -> GitRepository:
        """Open the project's git working tree, echoing commands under --verbose."""
        return GitRepository(
            self.load_config().project_dir,
            log=echo_command if self.verbose else None,
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# Results and progress go to stdout; errors and warnings go to stderr.


def echo_info(message: str) -> None:
    click.echo(message)


def echo_success(message: str) -> None:
    click.secho(message, fg="green")


def echo_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_warning(message: str) -> None:
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_command(message: str) -> None:
    """Print a command about to be run, for --verbose."""
    click.secho(f"$ {message}", dim=True, err=True)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="semtag")
@click.option(
    "--verbose",
    is_flag=True,
    help="Show the git commands being run.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Use this directory as the project root.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version bumping, comparison and release tagging.

    \b
    Examples:
        semtag bump patch 0.1.0             # prints 0.1.1
        semtag bump prerel rc1.1.0 1.0.1    # prints 1.0.1-rc1.1.0
        semtag compare 10.1.4-rc4 10.4.2-rc1
        semtag bump minor                   # release the next minor version
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import bump, compare, get, validate

cli.add_command(bump.bump)
cli.add_command(compare.compare)
cli.add_command(get.get)
cli.add_command(validate.validate)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, GitError, InvalidVersionError, BumpError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
