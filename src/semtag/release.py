# SPDX-License-Identifier: MIT
"""Release planning.

Turns the current version and a bump directive into the version, tag and
commit message for the next release. Nothing here touches the filesystem or
git; the CLI executes the plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bump import BumpDirective, bump_version
from .semver import Version

INITIAL_VERSION = Version(0, 0, 0)


@dataclass(frozen=True)
class ReleasePlan:
    """What a release will do.

    Attributes:
        previous: Version recorded before the release, None if there was none
        version: The new version
        tag: Name of the annotated tag to create
        previous_tag: Tag of the previous release, None if there was none
        message: Commit and tag message
    """

    previous: Optional[Version]
    version: Version
    tag: str
    previous_tag: Optional[str]
    message: str


def plan_release(
    current: Optional[Version],
    directive: BumpDirective,
    *,
    tag_prefix: str = "v",
) -> ReleasePlan:
    """Plan the next release.

    Args:
        current: The current version, or None when no version exists yet
            (the bump then starts from 0.0.0)
        directive: The bump to apply
        tag_prefix: Prefix prepended to the version to form the tag name

    Raises:
        InvalidVersionError: If the directive's label yields an invalid version
    """
    version = bump_version(current if current is not None else INITIAL_VERSION, directive)
    tag = f"{tag_prefix}{version}"
    return ReleasePlan(
        previous=current,
        version=version,
        tag=tag,
        previous_tag=f"{tag_prefix}{current}" if current is not None else None,
        message=f"Release {tag}",
    )
