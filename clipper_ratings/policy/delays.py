"""
Delay policies.

Each predicate answers "has this suppression window lapsed?". Invalid input
never raises: it fails closed and reports the window as not over.
"""

from typing import Optional

from clipper_ratings.policy.versions import is_ahead, parse_version
import config.settings as settings


def is_valid_date(
    date: Optional[int],
    maximum_time_value: int = settings.MAXIMUM_TIME_VALUE_MS
) -> bool:
    """True if date is an epoch-ms value within +/- maximum_time_value (inclusive)."""
    if date is None or isinstance(date, bool):
        return False
    return -maximum_time_value <= date <= maximum_time_value


def timing_delay_is_over(
    last_bad_rating_date: Optional[int],
    now: Optional[int],
    min_interval: int = settings.MIN_TIME_BETWEEN_BAD_RATINGS_MS,
    maximum_time_value: int = settings.MAXIMUM_TIME_VALUE_MS
) -> bool:
    """
    Returns True if ONE of the below applies:
      1) A bad rating has never been given (last_bad_rating_date is None), OR
      2) Both dates are valid and at least min_interval ms separate them
    """
    if last_bad_rating_date is None:
        return True

    if not is_valid_date(last_bad_rating_date, maximum_time_value) or \
            not is_valid_date(now, maximum_time_value):
        return False

    return (now - last_bad_rating_date) >= min_interval


def version_delay_is_over(
    bad_rating_version: Optional[str],
    last_seen_version: Optional[str]
) -> bool:
    """
    Returns True if ONE of the below applies:
      1) A bad rating has never been given (bad_rating_version is None), OR
      2) The user has since seen a non-patch update, i.e. last_seen_version
         is ahead of bad_rating_version
    """
    if bad_rating_version is None:
        return True

    bad_rating = parse_version(bad_rating_version)
    last_seen = parse_version(last_seen_version)
    if bad_rating is None or last_seen is None:
        return False

    return is_ahead(last_seen, bad_rating)


def usage_count_delay_is_over(
    num_clips: Optional[int],
    min_clips: int = settings.MIN_CLIP_SUCCESS_FOR_RATINGS_PROMPT,
    max_clips: int = settings.MAX_CLIP_SUCCESS_FOR_RATINGS_PROMPT
) -> bool:
    """True if num_clips is a non-negative int within [min_clips, max_clips]."""
    if num_clips is None or isinstance(num_clips, bool) or not isinstance(num_clips, int):
        return False
    if num_clips < 0:
        return False

    return min_clips <= num_clips <= max_clips
