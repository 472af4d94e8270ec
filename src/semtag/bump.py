# SPDX-License-Identifier: MIT
"""Deriving new versions from existing ones.

Numeric bumps reset the lower components and drop pre-release and build
metadata. Pre-release and build bumps replace a suffix and re-validate the
resulting string, so a malformed label surfaces as
:class:`~semtag.semver.InvalidVersionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .semver import SEMVER_GRAMMAR, InvalidVersionError, Version, parse_version


class BumpError(ValueError):
    """Raised when a bump directive is malformed."""

    pass


class BumpKind(str, Enum):
    """Which part of a version a bump changes."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerel"
    BUILD = "build"

    @property
    def takes_label(self) -> bool:
        return self in (BumpKind.PRERELEASE, BumpKind.BUILD)


_UNIT_ALIASES = {
    "prerelease": BumpKind.PRERELEASE,
}


@dataclass(frozen=True)
class BumpDirective:
    """A bump to apply: the kind of bump plus the label for suffix bumps."""

    kind: BumpKind
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind.takes_label and self.label is None:
            raise BumpError(f"A label is required for a {self.kind.value} bump")
        if not self.kind.takes_label and self.label is not None:
            raise BumpError(f"A {self.kind.value} bump does not take a label")

    @classmethod
    def major(cls) -> "BumpDirective":
        return cls(BumpKind.MAJOR)

    @classmethod
    def minor(cls) -> "BumpDirective":
        return cls(BumpKind.MINOR)

    @classmethod
    def patch(cls) -> "BumpDirective":
        return cls(BumpKind.PATCH)

    @classmethod
    def prerelease(cls, label: str) -> "BumpDirective":
        return cls(BumpKind.PRERELEASE, label)

    @classmethod
    def build(cls, label: str) -> "BumpDirective":
        return cls(BumpKind.BUILD, label)

    @classmethod
    def from_unit(cls, unit: str, label: Optional[str] = None) -> "BumpDirective":
        """Create a directive from a command-line unit name.

        Args:
            unit: One of major, minor, patch, prerel (or prerelease), build
            label: Label for prerel and build bumps

        Raises:
            BumpError: If the unit is unknown or the label does not fit it
        """
        normalized = unit.lower()
        kind = _UNIT_ALIASES.get(normalized)
        if kind is None:
            try:
                kind = BumpKind(normalized)
            except ValueError:
                choices = ", ".join(k.value for k in BumpKind)
                raise BumpError(f"Unknown bump unit '{unit}' (expected one of: {choices})") from None
        return cls(kind, label)

    def __str__(self) -> str:
        if self.label is None:
            return self.kind.value
        return f"{self.kind.value} {self.label}"


def bump_version(current: Union[str, Version], directive: BumpDirective) -> Version:
    """Return a new version derived from ``current``.

    Args:
        current: Version to bump (string or Version object)
        directive: The bump to apply

    Returns:
        A new Version; ``current`` is never modified

    Raises:
        InvalidVersionError: If ``current`` is an invalid string, or the
            label produces an invalid version

    Examples:
        >>> str(bump_version("0.1.1", BumpDirective.minor()))
        '0.2.0'
        >>> str(bump_version("1.0.1", BumpDirective.prerelease("rc1.1.0")))
        '1.0.1-rc1.1.0'
        >>> str(bump_version("1.0.1-rc1.1.0", BumpDirective.build("build.051")))
        '1.0.1-rc1.1.0+build.051'
    """
    v = parse_version(current) if isinstance(current, str) else current
    kind = directive.kind

    if kind is BumpKind.MAJOR:
        return Version(v.major + 1, 0, 0)
    if kind is BumpKind.MINOR:
        return Version(v.major, v.minor + 1, 0)
    if kind is BumpKind.PATCH:
        return Version(v.major, v.minor, v.patch + 1)

    if kind is BumpKind.PRERELEASE:
        candidate = f"{v.base_version}-{directive.label}"
    else:
        candidate = v.base_version
        if v.prerelease is not None:
            candidate += f"-{v.prerelease}"
        candidate += f"+{directive.label}"
    bumped = parse_version(candidate)

    # "rc+1" is a valid suffix on its own but not a pre-release label.
    field = "prerelease" if kind is BumpKind.PRERELEASE else "build"
    if getattr(bumped, field) != directive.label:
        raise InvalidVersionError(
            candidate,
            f"'{directive.label}' is not a valid {field} label for version {candidate} "
            f"(expected the semver scheme '{SEMVER_GRAMMAR}')",
        )
    return bumped
