# SPDX-License-Identifier: MIT
"""Property-based tests for parsing and ordering.

These tests verify that:
- Canonical version strings survive a parse/render round trip
- Default ordering is reflexive, antisymmetric and transitive
- Build metadata never changes default ordering
- Increment operations always produce a higher version
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from semver_grammar import (
    ABSENT,
    GrammarError,
    compare_metadata,
    is_valid_semver,
    parse,
    try_parse,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numeric_ids = st.from_regex(r"0|[1-9][0-9]{0,6}", fullmatch=True)
alphanumeric_ids = st.from_regex(r"[0-9]{0,2}[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)
pre_release_ids = st.one_of(numeric_ids, alphanumeric_ids)
build_ids = st.one_of(st.from_regex(r"[0-9]{1,5}", fullmatch=True), alphanumeric_ids)


@st.composite
def version_strings(draw, with_build: bool | None = None):
    """Generate a canonical version string."""
    core = ".".join(draw(numeric_ids) for _ in range(3))
    text = core
    if draw(st.booleans()):
        text += "-" + ".".join(draw(st.lists(pre_release_ids, min_size=1, max_size=4)))
    if with_build is None:
        with_build = draw(st.booleans())
    if with_build:
        text += "+" + ".".join(draw(st.lists(build_ids, min_size=1, max_size=3)))
    return text


versions = version_strings().map(parse)


class TestRoundTrip:
    """Parsing then rendering returns the input."""

    @given(text=version_strings())
    @settings(max_examples=200)
    def test_round_trip(self, text: str):
        """Property: str(parse(v)) == v for canonical v."""
        assert str(parse(text)) == text
        assert is_valid_semver(text)

    @given(text=st.text(max_size=20))
    @settings(max_examples=200)
    def test_never_crashes(self, text: str):
        """Property: arbitrary text either parses or yields a typed error."""
        result = try_parse(text)
        if result.ok:
            assert str(result.value) == text
        else:
            assert result.error is not None


class TestOrderingProperties:
    """Default ordering is a total order over precedence."""

    @given(a=versions)
    def test_reflexive(self, a):
        """Property: a.compare(a) == 0."""
        assert a.compare(a) == 0
        assert a.compare_with_builds(a) == 0

    @given(a=versions, b=versions)
    def test_antisymmetric(self, a, b):
        """Property: a.compare(b) == -b.compare(a)."""
        assert a.compare(b) == -b.compare(a)
        assert a.compare_with_builds(b) == -b.compare_with_builds(a)

    @given(a=versions, b=versions, c=versions)
    @settings(max_examples=200)
    def test_transitive(self, a, b, c):
        """Property: a <= b and b <= c implies a <= c."""
        ordered = sorted([a, b, c])
        assert ordered[0] <= ordered[1] <= ordered[2]
        assert ordered[0].compare(ordered[2]) <= 0

    @given(a=versions, b=versions)
    def test_equality_consistent_with_hash(self, a, b):
        """Property: equal versions have equal hashes."""
        if a == b:
            assert hash(a) == hash(b)

    @given(text=version_strings(with_build=True))
    def test_build_ignored(self, text: str):
        """Property: dropping build metadata keeps default precedence."""
        with_build = parse(text)
        without_build = parse(text.split("+", 1)[0])
        assert with_build.compare(without_build) == 0
        assert with_build.compare_with_builds(without_build) == -compare_metadata(
            with_build.build, ABSENT
        )


class TestIncrementProperties:
    """Increments always move a version up."""

    @given(v=versions)
    def test_core_increments_are_higher(self, v):
        """Property: every core bump yields a higher version without metadata."""
        for bumped in (v.increment_major(), v.increment_minor(), v.increment_patch()):
            assert bumped > v
            assert bumped.pre_release == ""
            assert bumped.build_metadata == ""

    @given(v=versions)
    def test_pre_release_increment_is_higher(self, v):
        """Property: incrementing a pre-release yields a higher version."""
        if v.is_prerelease:
            assert v.increment_pre_release() > v


class TestRejectionProperties:
    """Malformed cores are always rejected."""

    @given(
        leading=st.from_regex(r"0[0-9]{1,4}", fullmatch=True),
        position=st.integers(min_value=0, max_value=2),
    )
    def test_leading_zero_in_core(self, leading: str, position: int):
        """Property: any core number with a leading zero is a grammar error."""
        parts = ["1", "2", "3"]
        parts[position] = leading
        result = try_parse(".".join(parts))
        assert not result.ok
        assert isinstance(result.error, GrammarError)
