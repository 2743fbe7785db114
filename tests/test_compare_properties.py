# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and comparison.

These tests verify that:
- Parsing is deterministic
- compare_versions is reflexive and antisymmetric
- less is a strict total order that agrees with version_key
- shares_prefix_with and limited_equal are reflexive and symmetric
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from colver import (
    compare_versions,
    is_valid_version,
    less,
    limited_equal,
    parse_version,
    shares_prefix_with,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

columns = st.integers(min_value=0, max_value=10**6)

release_labels = st.sampled_from(["alpha", "beta", "pre", "rc", "r", "p"])

separators = st.sampled_from(["-", "_"])


def _dotted(numbers: list[int]) -> str:
    return ".".join(str(n) for n in numbers)


@st.composite
def section(draw):
    """Generate a release or specifier section, e.g. ``-rc.1`` or ``_634.0``."""
    sep = draw(separators)
    label = draw(st.one_of(st.none(), release_labels))
    if label is None:
        return sep + _dotted(draw(st.lists(columns, min_size=1, max_size=4)))
    numbers = draw(st.lists(columns, min_size=0, max_size=4))
    if not numbers:
        return sep + label
    joiner = draw(st.sampled_from([".", ""]))
    return sep + label + joiner + _dotted(numbers)


@st.composite
def version_string(draw):
    """Generate a valid version string."""
    text = _dotted(draw(st.lists(columns, min_size=1, max_size=4)))
    for part in draw(st.lists(section(), max_size=2)):
        text += part
    if draw(st.booleans()):
        text += f"+build{draw(columns)}"
    return text


# Small pools make equal and prefix-sharing pairs likely
small_columns = st.integers(min_value=0, max_value=2)


@st.composite
def close_version_string(draw):
    """Generate versions from a small pool so that collisions are common."""
    text = _dotted(draw(st.lists(small_columns, min_size=1, max_size=2)))
    label = draw(st.one_of(st.none(), st.sampled_from(["beta", "rc", "p"])))
    if label is not None:
        text += f"-{label}{draw(small_columns)}"
        if draw(st.booleans()):
            text += f"-p{draw(small_columns)}"
    if draw(st.booleans()):
        text += f"+build{draw(small_columns)}"
    return text


any_version = st.one_of(version_string(), close_version_string())


# =============================================================================
# Property tests
# =============================================================================


class TestParsingProperties:
    """Properties of parse_version."""

    @given(text=version_string())
    @settings(max_examples=200)
    def test_generated_versions_are_valid(self, text):
        """Every string following the grammar parses."""
        assert is_valid_version(text)

    @given(text=any_version)
    @settings(max_examples=100)
    def test_deterministic(self, text):
        """Parsing the same string twice yields equal records."""
        a, b = parse_version(text), parse_version(text)
        assert a == b
        assert compare_versions(a, b) == 0
        assert not less(a, b)
        assert not less(b, a)

    @given(text=any_version, other=any_version)
    @settings(max_examples=100)
    def test_reparse_matches_fresh_parse(self, text, other):
        """Parsing into a used record equals parsing into a new one."""
        v = parse_version(other)
        assert v.parse(text) == parse_version(text)


class TestOrderingProperties:
    """Properties of compare_versions, less and version_key."""

    @given(text=any_version)
    @settings(max_examples=100)
    def test_reflexive(self, text):
        """A version compares equal to itself."""
        v = parse_version(text)
        assert compare_versions(v, v) == 0
        assert less(v, v) is False

    @given(a=any_version, b=any_version)
    @settings(max_examples=200)
    def test_antisymmetric(self, a, b):
        """Swapping arguments negates the comparison."""
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(a=any_version, b=any_version)
    @settings(max_examples=200)
    def test_less_agrees_with_key(self, a, b):
        """less orders exactly like version_key."""
        assert less(a, b) == (version_key(a) < version_key(b))

    @given(a=any_version, b=any_version)
    @settings(max_examples=200)
    def test_less_is_total(self, a, b):
        """Exactly one of a < b, b < a or a == b holds."""
        outcomes = [less(a, b), less(b, a), version_key(a) == version_key(b)]
        assert outcomes.count(True) == 1

    @given(a=any_version, b=any_version, c=any_version)
    @settings(max_examples=200)
    def test_less_is_transitive(self, a, b, c):
        """If a < b and b < c then a < c."""
        if less(a, b) and less(b, c):
            assert less(a, c)

    @given(versions=st.lists(any_version, min_size=2, max_size=10))
    @settings(max_examples=100)
    def test_sorted_sequence(self, versions):
        """Sorting by version_key never places a greater version first."""
        ordered = sorted(versions, key=version_key)
        for earlier, later in zip(ordered, ordered[1:]):
            assert not less(later, earlier)
            assert compare_versions(earlier, later) <= 0


class TestEquivalenceProperties:
    """Properties of shares_prefix_with and limited_equal."""

    @given(text=any_version)
    @settings(max_examples=100)
    def test_reflexive(self, text):
        """Every version is equivalent to itself."""
        assert shares_prefix_with(text, text)
        assert limited_equal(text, text)

    @given(a=close_version_string(), b=close_version_string())
    @settings(max_examples=200)
    def test_symmetric(self, a, b):
        """Equivalence does not depend on argument order."""
        assert shares_prefix_with(a, b) == shares_prefix_with(b, a)
        assert limited_equal(a, b) == limited_equal(b, a)

    @given(a=close_version_string(), b=close_version_string())
    @settings(max_examples=200)
    def test_limited_equal_implies_prefix(self, a, b):
        """Versions of the same release share their base version."""
        if limited_equal(a, b):
            assert shares_prefix_with(a, b)

    @given(a=any_version, b=any_version)
    @settings(max_examples=100)
    def test_full_equality_implies_limited(self, a, b):
        """Fully equal versions are also equal at lower precision."""
        if compare_versions(a, b) == 0:
            assert limited_equal(a, b)
            assert shares_prefix_with(a, b)
