# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from semver_engine import (
    AlphanumericIdentifier,
    InvalidVersionError,
    NumericIdentifier,
    Ordering,
    compare_identifiers,
    compare_versions,
    is_equal,
    is_newer,
    is_newer_or_equal,
    is_older,
    is_older_or_equal,
    parse_version,
    sort_versions,
    version_key,
)

# 1.0.0-alpha < 1.0.0-alpha.1 < ... < 1.0.0, from semver.org item 11
PRECEDENCE_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "2.0.0",
    "2.1.0",
    "2.1.1",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == Ordering.EQUAL

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == Ordering.LESS
        assert compare_versions("2.0.0", "1.0.0") == Ordering.GREATER

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexical(self):
        """Test that core components compare as integers."""
        assert compare_versions("1.10.0", "1.9.0") == 1
        assert compare_versions("10.0.0", "9.99.99") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_core_beats_prerelease(self):
        """Test that the core triple decides before pre-release."""
        assert compare_versions("1.0.1-alpha", "1.0.0") == 1

    def test_numbered_prerelease(self):
        """Test comparison of numbered pre-releases."""
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.2") == -1
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.1") == 1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1") == 0

    def test_numeric_identifiers_compare_as_integers(self):
        assert compare_versions("1.0.0-beta.2", "1.0.0-beta.11") == -1

    def test_numeric_lower_than_alphanumeric(self):
        """Test that numeric identifiers have lower precedence."""
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta") == -1
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-1", "1.0.0-0a") == -1

    def test_alphanumeric_ascii_order(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-rc", "1.0.0-beta") == 1
        assert compare_versions("1.0.0-a-b", "1.0.0-a0") == -1

    def test_longer_prerelease_wins_on_common_prefix(self):
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.0") == -1
        assert compare_versions("1.0.0-alpha.beta.1", "1.0.0-alpha.beta") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+a", "1.0.0+b") == Ordering.EQUAL
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-alpha+build.1", "1.0.0-alpha+build.2") == 0
        assert compare_versions("1.0.0-alpha.1+build.1", "1.0.0-alpha+build.2") == 1

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("2.0.0")
        assert compare_versions(v1, v2) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for the SemVer precedence chain."""

    def test_chain_is_strictly_increasing(self):
        for lower, higher in zip(PRECEDENCE_CHAIN, PRECEDENCE_CHAIN[1:]):
            assert compare_versions(lower, higher) == -1, (lower, higher)
            assert compare_versions(higher, lower) == 1, (higher, lower)

    def test_sort_shuffled_chain(self):
        shuffled = list(reversed(PRECEDENCE_CHAIN))
        shuffled[2], shuffled[7] = shuffled[7], shuffled[2]
        assert sorted(shuffled, key=version_key) == PRECEDENCE_CHAIN


class TestCompareIdentifiers:
    """Tests for compare_identifiers function."""

    def test_numeric(self):
        assert compare_identifiers(NumericIdentifier(2), NumericIdentifier(11)) == -1
        assert compare_identifiers(NumericIdentifier(7), NumericIdentifier(7)) == 0

    def test_mixed(self):
        assert compare_identifiers(NumericIdentifier(100), AlphanumericIdentifier("a")) == -1
        assert compare_identifiers(AlphanumericIdentifier("a"), NumericIdentifier(100)) == 1

    def test_alphanumeric(self):
        assert compare_identifiers(AlphanumericIdentifier("b"), AlphanumericIdentifier("a")) == 1
        assert compare_identifiers(AlphanumericIdentifier("x"), AlphanumericIdentifier("x")) == 0


class TestComparisonHelpers:
    """Tests for the boolean comparison helpers."""

    def test_release_vs_prerelease(self):
        release = parse_version("1.0.0")
        pre_release = parse_version("1.0.0-alpha")

        assert is_newer(release, pre_release)
        assert is_newer_or_equal(release, pre_release)
        assert not is_equal(release, pre_release)
        assert not is_older_or_equal(release, pre_release)
        assert not is_older(release, pre_release)

    def test_build_metadata_equal(self):
        v1 = parse_version("1.0.0+build.1")
        v2 = parse_version("1.0.0+build.2")

        assert is_equal(v1, v2)
        assert is_newer_or_equal(v1, v2)
        assert is_older_or_equal(v1, v2)
        assert not is_newer(v1, v2)
        assert not is_older(v1, v2)


class TestVersionKey:
    """Tests for version_key and sort_versions."""

    def test_sort_strings(self):
        versions = ["2.0.0", "1.0.0", "1.0.0-alpha", "1.0.0-beta", "1.1.0"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-alpha",
            "1.0.0-beta",
            "1.0.0",
            "1.1.0",
            "2.0.0",
        ]

    def test_key_equal_for_build_variants(self):
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_sort_versions(self):
        result = sort_versions(["1.10.0", "1.2.0", "1.2.0-beta"])
        assert [str(v) for v in result] == ["1.2.0-beta", "1.2.0", "1.10.0"]

    def test_sort_versions_reverse(self):
        result = sort_versions(["1.0.0", "3.0.0", "2.0.0"], reverse=True)
        assert [str(v) for v in result] == ["3.0.0", "2.0.0", "1.0.0"]

    def test_sort_versions_stable_for_build(self):
        result = sort_versions(["1.0.0+b", "1.0.0+a"])
        assert [str(v) for v in result] == ["1.0.0+b", "1.0.0+a"]
