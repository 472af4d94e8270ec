# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, comparison and bumping.

These tests verify that:
- Every string in the grammar parses and re-serializes unchanged
- Every string outside the grammar is rejected
- Comparison is reflexive, antisymmetric and agrees with version_key
- Bumps always produce versions newer than their input where they should
"""

from __future__ import annotations

import re

from hypothesis import assume, given, strategies as st

from semtag import (
    BumpDirective,
    InvalidVersionError,
    bump_version,
    compare_versions,
    parse_version,
    version_key,
)

# Reference grammar, used only as a test oracle
GRAMMAR = re.compile(
    r"(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(-[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?"
    r"(\+[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?"
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

IDENTIFIER_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-"

numbers = st.integers(min_value=0, max_value=10**25).map(str)
identifiers = st.text(alphabet=IDENTIFIER_ALPHABET, min_size=1, max_size=8)
dotted = st.lists(identifiers, min_size=1, max_size=4).map(".".join)


@st.composite
def valid_versions(draw):
    """Generate a string that follows the semantic version grammar."""
    text = ".".join(draw(numbers) for _ in range(3))
    if draw(st.booleans()):
        text += "-" + draw(dotted)
    if draw(st.booleans()):
        text += "+" + draw(dotted)
    return text


# Text built from characters that appear in versions, plus a few that do not
version_like_text = st.text(alphabet="0123456789.-+aZ_ ", max_size=20)


# =============================================================================
# Parsing
# =============================================================================


@given(valid_versions())
def test_round_trip(text):
    """Parsing then formatting reproduces the input exactly."""
    assert str(parse_version(text)) == text


@given(version_like_text)
def test_parse_agrees_with_grammar(text):
    """A string parses if and only if it matches the grammar."""
    if GRAMMAR.fullmatch(text):
        assert str(parse_version(text)) == text
    else:
        try:
            parse_version(text)
        except InvalidVersionError as e:
            assert e.version == text
        else:
            raise AssertionError(f"{text!r} should have been rejected")


@given(valid_versions(), st.sampled_from([" ", "\n", ".0", "-", "+", "_"]))
def test_trailing_garbage_rejected(text, suffix):
    """Appending a stray character to a version never yields a valid version.

    A lone "-" or "+" after a complete version starts an empty suffix.
    """
    candidate = text + suffix
    assume(not GRAMMAR.fullmatch(candidate))
    try:
        parse_version(candidate)
    except InvalidVersionError:
        pass
    else:
        raise AssertionError(f"{candidate!r} should have been rejected")


# =============================================================================
# Comparison
# =============================================================================


@given(valid_versions(), st.booleans())
def test_reflexive(text, strict):
    assert compare_versions(text, text, strict=strict) == 0


@given(valid_versions(), valid_versions(), st.booleans())
def test_antisymmetric(a, b, strict):
    assert compare_versions(a, b, strict=strict) == -compare_versions(b, a, strict=strict)


@given(valid_versions(), valid_versions(), st.booleans())
def test_agrees_with_version_key(a, b, strict):
    key_a = version_key(a, strict=strict)
    key_b = version_key(b, strict=strict)
    expected = (key_a > key_b) - (key_a < key_b)
    assert compare_versions(a, b, strict=strict) == expected


@given(valid_versions(), dotted)
def test_build_metadata_ignored(text, build):
    base = text.split("+", 1)[0]
    assert compare_versions(f"{base}+{build}", base) == 0


# =============================================================================
# Bumping
# =============================================================================


@given(
    valid_versions(),
    st.sampled_from([BumpDirective.major(), BumpDirective.minor(), BumpDirective.patch()]),
    st.booleans(),
)
def test_numeric_bump_is_newer(text, directive, strict):
    """A numeric bump always produces a newer, suffix-free version."""
    bumped = bump_version(text, directive)
    assert bumped.prerelease is None
    assert bumped.build is None
    assert compare_versions(bumped, text, strict=strict) == 1


@given(valid_versions(), dotted)
def test_build_bump_keeps_precedence(text, label):
    """A build bump never changes where a version sorts."""
    bumped = bump_version(text, BumpDirective.build(label))
    assert bumped.build == label
    assert compare_versions(bumped, text) == 0


@given(valid_versions(), dotted)
def test_prerelease_bump_keeps_numbers(text, label):
    current = parse_version(text)
    bumped = bump_version(current, BumpDirective.prerelease(label))
    assert bumped.base_version == current.base_version
    assert bumped.prerelease == label
    assert bumped.build is None
