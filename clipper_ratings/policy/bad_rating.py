"""
Bad Rating Recorder.

Persists negative ratings and the do-not-prompt flag.
"""

import logging

from clipper_ratings.models.event import EventLabel, LogEvent
from clipper_ratings.models.stored_record import StorageKeys
from clipper_ratings.policy.delays import is_valid_date
from clipper_ratings.policy.versions import version_has_correct_format
from clipper_ratings.protocols import EventLogger, KeyValueStorage
from clipper_ratings.utils.parsing import parse_int
import config.settings as settings

logger = logging.getLogger(__name__)


class BadRatingRecorder:
    """
    Writes bad rating observations to storage.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        event_logger: EventLogger,
        maximum_time_value: int = settings.MAXIMUM_TIME_VALUE_MS
    ):
        self.storage = storage
        self.event_logger = event_logger
        self.maximum_time_value = maximum_time_value

    def set_last_bad_rating(self, bad_rating_date: str, bad_rating_version: str) -> bool:
        """
        Record a bad rating given at bad_rating_date (epoch ms) on bad_rating_version.

        Args:
            bad_rating_date: Epoch milliseconds as a decimal string
            bad_rating_version: Client version in "X.Y.Z" format

        Returns:
            True if a bad rating had already been recorded before this one.
            Also True, with nothing written, if either input is invalid.
        """
        date = parse_int(bad_rating_date)
        if not is_valid_date(date, self.maximum_time_value):
            logger.warning(f"Invalid bad rating date {bad_rating_date!r}, treating as repeat bad rating")
            return True

        if not version_has_correct_format(bad_rating_version):
            logger.warning(f"Invalid bad rating version {bad_rating_version!r}, treating as repeat bad rating")
            return True

        previous_date = parse_int(self.storage.get_cached_value(StorageKeys.LAST_BAD_RATING_DATE))
        already_occurred = is_valid_date(previous_date, self.maximum_time_value)

        self.storage.set_value(StorageKeys.LAST_BAD_RATING_DATE, bad_rating_date)
        self.storage.set_value(StorageKeys.LAST_BAD_RATING_VERSION, bad_rating_version)

        logger.info(
            f"Recorded bad rating at {bad_rating_date} on version {bad_rating_version} "
            f"(previous bad rating: {already_occurred})"
        )
        return already_occurred

    def set_do_not_prompt_status(self) -> None:
        """Stop prompting for good, and log that the user asked for it."""
        self.storage.set_value(StorageKeys.DO_NOT_PROMPT_RATINGS, "true")
        self.event_logger.log_event(LogEvent(label=EventLabel.SET_DO_NOT_PROMPT_RATINGS))
        logger.info("Set doNotPromptRatings")
