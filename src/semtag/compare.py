# SPDX-License-Identifier: MIT
"""Version comparison.

Two orderings are available:

- The default, compatible ordering compares pre-release strings as whole
  strings in ASCII order, and ranks a version carrying a pre-release above the
  same version without one (``1.0.1-rc1 > 1.0.1``). This is the ordering
  existing ``semtag`` users and release scripts rely on.
- The strict ordering (``strict=True``) follows SemVer 2.0.0 precedence:
  releases outrank pre-releases and pre-release identifiers are compared one
  by one, numerically where both are numeric.

Build metadata is ignored in both.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from .semver import Version, parse_version


class Ordering(IntEnum):
    """Result of comparing a version against another one."""

    OLDER = -1
    EQUAL = 0
    NEWER = 1

    def __str__(self) -> str:
        return str(self.value)


def _sign(left, right) -> Ordering:
    if left < right:
        return Ordering.OLDER
    if left > right:
        return Ordering.NEWER
    return Ordering.EQUAL


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _identifier_key(part: str) -> tuple:
    # Numeric identifiers sort before alphanumeric ones.
    if part.isdigit():
        return (0, int(part), part)
    return (1, 0, part)


def _compare_prerelease(pre1: str | None, pre2: str | None) -> Ordering:
    """Compare two pre-release strings as whole ASCII strings.

    A missing pre-release is older than any pre-release.
    """
    if pre1 is None and pre2 is None:
        return Ordering.EQUAL
    if pre1 is None:
        return Ordering.OLDER
    if pre2 is None:
        return Ordering.NEWER
    return _sign(pre1, pre2)


def _compare_prerelease_strict(pre1: str | None, pre2: str | None) -> Ordering:
    """Compare two pre-release strings following SemVer 2.0.0 precedence.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 is None and pre2 is None:
        return Ordering.EQUAL
    if pre1 is None:
        return Ordering.NEWER
    if pre2 is None:
        return Ordering.OLDER

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = _sign(_identifier_key(p1), _identifier_key(p2))
        if result:
            return result

    # All compared parts equal - longer pre-release has higher precedence
    return _sign(len(parts1), len(parts2))


def compare_versions(
    version1: Union[str, Version],
    version2: Union[str, Version],
    *,
    strict: bool = False,
) -> Ordering:
    """Compare two semantic versions.

    The result describes ``version1`` relative to ``version2``: it is ``-1``
    when the *second* argument is newer, ``0`` when both are equal, and ``1``
    when the *second* argument is older. :class:`Ordering` is an ``IntEnum``,
    so the result compares equal to those integers.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        strict: Use SemVer 2.0.0 pre-release precedence instead of the
            whole-string comparison

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("10.1.4-rc4", "10.4.2-rc1")
        <Ordering.OLDER: -1>
        >>> compare_versions("1.0.1-rc1.1.0+build.051", "1.0.1-rc1.1.0")
        <Ordering.EQUAL: 0>
        >>> compare_versions("1.0.1-rc1.1.0+build.051", "1.0.1")
        <Ordering.NEWER: 1>
        >>> compare_versions("1.0.1-rc1.1.0", "1.0.1", strict=True)
        <Ordering.OLDER: -1>
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    if strict:
        return _compare_prerelease_strict(v1.prerelease, v2.prerelease)
    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version], *, strict: bool = False) -> tuple:
    """Return a sort key for a version, consistent with :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0-rc", "2.0.0", "1.0.0"], key=version_key)
        ['1.0.0', '1.0.0-rc', '2.0.0']
        >>> sorted(["1.0.0-rc", "2.0.0", "1.0.0"], key=lambda v: version_key(v, strict=True))
        ['1.0.0-rc', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    if strict:
        if v.prerelease is None:
            prerelease_key: tuple = (1,)
        else:
            parts = tuple(_identifier_key(part) for part in v.prerelease.split("."))
            prerelease_key = (0, parts)
    elif v.prerelease is None:
        prerelease_key = (0, "")
    else:
        prerelease_key = (1, v.prerelease)

    return (v.major, v.minor, v.patch, prerelease_key)


def max_version(
    versions: Iterable[Union[str, Version]], *, strict: bool = False
) -> Version:
    """Return the newest of the given versions as a Version object.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_as_version(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed, key=lambda v: version_key(v, strict=strict))
