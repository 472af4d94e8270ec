# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -rc1.1.0, -0.3.7
- Build metadata: +build, +build.051, +20240101

Parsing is done by a small hand-written scanner rather than a regular
expression, so every field is produced directly while walking the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SEMVER_GRAMMAR = "X.Y.Z(-PRERELEASE)(+BUILD)"

_DIGITS = frozenset("0123456789")
_IDENTIFIER_CHARS = frozenset(
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-"
)


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.grammar = SEMVER_GRAMMAR
        self.message = message or (
            f"version {version} does not match the semver scheme '{SEMVER_GRAMMAR}'"
        )
        super().__init__(self.message)


class _Scanner:
    """Cursor over a version string.

    Each ``read_*`` method consumes one grammar element and returns ``None``
    without moving the cursor when the element is not present.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def accept(self, char: str) -> bool:
        if not self.done and self.text[self.pos] == char:
            self.pos += 1
            return True
        return False

    def read_numeric(self) -> Optional[int]:
        start = self.pos
        while not self.done and self.text[self.pos] in _DIGITS:
            self.pos += 1
        digits = self.text[start : self.pos]
        if not digits or (len(digits) > 1 and digits[0] == "0"):
            self.pos = start
            return None
        try:
            return int(digits)
        except ValueError:
            # Longer than sys.get_int_max_str_digits() allows.
            self.pos = start
            return None

    def read_identifier(self) -> Optional[str]:
        start = self.pos
        while not self.done and self.text[self.pos] in _IDENTIFIER_CHARS:
            self.pos += 1
        if self.pos == start:
            return None
        return self.text[start : self.pos]

    def read_dotted(self) -> Optional[str]:
        """Read one or more identifiers separated by single dots."""
        start = self.pos
        if self.read_identifier() is None:
            return None
        while self.accept("."):
            if self.read_identifier() is None:
                self.pos = start
                return None
        return self.text[start : self.pos]


def _is_dotted_identifiers(value: str) -> bool:
    scanner = _Scanner(value)
    return scanner.read_dotted() is not None and scanner.done


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Optional pre-release identifiers (e.g., "rc1.1.0", "beta")
        build: Optional build metadata (e.g., "build.051", "20240101")

    Instances built directly are checked against the same rules as
    :func:`parse_version`; an invalid combination raises
    :class:`InvalidVersionError`.
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for number in (self.major, self.minor, self.patch):
            if isinstance(number, bool) or not isinstance(number, int) or number < 0:
                raise InvalidVersionError(
                    str(number), f"Version numbers must be non-negative integers, got {number!r}"
                )
            try:
                str(number)
            except ValueError:
                # Bumped past sys.get_int_max_str_digits() digits.
                raise InvalidVersionError(
                    "<oversized version>",
                    "Version number has too many digits to be written out",
                ) from None
        for suffix in (self.prerelease, self.build):
            if suffix is not None and (
                not isinstance(suffix, str) or not _is_dotted_identifiers(suffix)
            ):
                raise InvalidVersionError(self._render())

    def _render(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self._render()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match ``MAJOR.MINOR.PATCH(-PRERELEASE)?(+BUILD)?``.
    Numeric parts are ``0`` or digits without a leading zero; pre-release and
    build are dot-separated identifiers made of ``[0-9A-Za-z-]``. Whitespace
    is not stripped.

    Args:
        version_string: A string following semantic versioning format

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("1.0.1-rc1.1.0+build.051")
        Version(major=1, minor=0, patch=1, prerelease='rc1.1.0', build='build.051')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    scanner = _Scanner(version_string)

    numbers: list[int] = []
    for index in range(3):
        if index and not scanner.accept("."):
            raise InvalidVersionError(version_string)
        number = scanner.read_numeric()
        if number is None:
            raise InvalidVersionError(version_string)
        numbers.append(number)

    prerelease = None
    if scanner.accept("-"):
        prerelease = scanner.read_dotted()
        if prerelease is None:
            raise InvalidVersionError(version_string)

    build = None
    if scanner.accept("+"):
        build = scanner.read_dotted()
        if build is None:
            raise InvalidVersionError(version_string)

    if not scanner.done:
        raise InvalidVersionError(version_string)

    major, minor, patch = numbers
    return Version(major=major, minor=minor, patch=patch, prerelease=prerelease, build=build)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
