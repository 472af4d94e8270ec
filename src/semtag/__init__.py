# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and bumping.

This package provides a pure core for working with semantic versions and a
``semtag`` command that records, commits and tags releases.

Example:
    >>> from semtag import parse_version, compare_versions, bump_version, BumpDirective
    >>>
    >>> version = parse_version("1.0.1-rc1.1.0+build.051")
    >>> version.prerelease
    'rc1.1.0'
    >>>
    >>> str(bump_version("0.2.1", BumpDirective.major()))
    '1.0.0'
    >>>
    >>> compare_versions("10.1.4-rc4", "10.4.2-rc1")
    <Ordering.OLDER: -1>
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_GRAMMAR,
)
from .compare import (
    Ordering,
    compare_versions,
    max_version,
    version_key,
)
from .bump import (
    BumpDirective,
    BumpError,
    BumpKind,
    bump_version,
)
from .release import (
    ReleasePlan,
    plan_release,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_GRAMMAR",
    # Version comparison
    "Ordering",
    "compare_versions",
    "max_version",
    "version_key",
    # Bumping
    "BumpDirective",
    "BumpError",
    "BumpKind",
    "bump_version",
    # Releases
    "ReleasePlan",
    "plan_release",
]
