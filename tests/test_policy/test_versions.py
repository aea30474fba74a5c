"""
Unit tests for version parsing and comparison.
"""

import pytest
from clipper_ratings.policy.delays import version_delay_is_over
from clipper_ratings.policy.versions import is_ahead, parse_version, version_has_correct_format


def test_parse_version_returns_major_and_minor():
    """Test parsing major and minor from X.Y.Z."""
    assert parse_version("3.4.1") == (3, 4)
    assert parse_version("0.0.0") == (0, 0)


@pytest.mark.parametrize("version", [None, "", "2.0", "1.2.3.4", "1.x.3", "1..3", "a.b.c", "1.2.beta"])
def test_parse_version_rejects_malformed(version):
    """Test that malformed versions do not parse."""
    assert parse_version(version) is None
    assert not version_has_correct_format(version)


def test_zero_segments_are_not_confused_with_invalid():
    """A legitimate 0 major/minor must parse, not read as absent."""
    assert parse_version("0.1.0") == (0, 1)
    assert version_has_correct_format("0.0.1")


def test_is_ahead_major_wins():
    """Test that a greater major version is ahead."""
    assert is_ahead((2, 0), (1, 9))
    assert not is_ahead((1, 9), (2, 0))


def test_is_ahead_same_major_compares_minor():
    """Test minor comparison under the same major version."""
    assert is_ahead((1, 3), (1, 2))
    assert not is_ahead((1, 2), (1, 2))
    assert not is_ahead((1, 1), (1, 2))


def test_suffixed_segments_read_their_leading_integer():
    """Test that pre-release suffixes like "-beta" do not make a version malformed."""
    assert parse_version("3.4.1-beta") == (3, 4)
    assert parse_version("3.4rc1.0") == (3, 4)
    assert version_has_correct_format("3.4.1-beta")


def test_suffixed_version_compares_like_its_numbers():
    """Test that a pre-release bad rating version still lapses on a minor update."""
    assert version_delay_is_over("3.4.1-beta", "3.5.0")
    assert not version_delay_is_over("3.4.1-beta", "3.4.2")
