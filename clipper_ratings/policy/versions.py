"""
Version comparison.

Versions follow the three-part convention "X.Y.Z":
X = major, Y = minor, Z = patch. Only major and minor take part in
comparisons; a patch-only update never counts as a newer version.
"""

from typing import Optional, Tuple

from clipper_ratings.utils.parsing import parse_int

VERSION_SEGMENT_COUNT = 3


def parse_version(version: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse "X.Y.Z" into (major, minor).

    Returns:
        (major, minor), or None unless version has exactly three
        dot-separated integer segments
    """
    if version is None:
        return None

    segments = str(version).split(".")
    if len(segments) != VERSION_SEGMENT_COUNT:
        return None

    parsed = [parse_int(segment) for segment in segments]
    if any(value is None for value in parsed):
        return None

    return parsed[0], parsed[1]


def version_has_correct_format(version: Optional[str]) -> bool:
    return parse_version(version) is not None


def is_ahead(version: Tuple[int, int], other: Tuple[int, int]) -> bool:
    """True if version has a greater major, or the same major and a greater minor."""
    major, minor = version
    other_major, other_minor = other
    if major > other_major:
        return True
    return major == other_major and minor > other_minor
