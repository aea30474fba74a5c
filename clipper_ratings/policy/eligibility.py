"""
Ratings Prompt Eligibility Engine.

Decides once per session whether to show the ratings prompt, and emits
one diagnostic event per evaluation.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from clipper_ratings.models.event import (
    EventLabel,
    EventStatus,
    LogEvent,
    PropertyName,
    RatingsLoggingInfo,
)
from clipper_ratings.models.session import RatingsSession
from clipper_ratings.models.stored_record import StorageKeys, StoredRatingRecord
from clipper_ratings.policy.client_config import ClientConfigResolver, client_type_name
from clipper_ratings.policy.delays import (
    is_valid_date,
    timing_delay_is_over,
    usage_count_delay_is_over,
    version_delay_is_over,
)
from clipper_ratings.protocols import Clock, EventLogger, KeyValueStorage
from clipper_ratings.utils.clock import current_time_ms
import config.settings as settings

logger = logging.getLogger(__name__)

MISSING_SESSION_ERROR = "session state is missing"


class RatingsPromptEngine:
    """
    Shows the ratings prompt only if ALL of the below apply:
      * The prompt is enabled for the session's client type
      * The stored doNotPromptRatings flag is not "true"
      * The bad rating timing delay is over
      * The bad rating version delay is over
      * The successful clip count is inside the configured window
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        config_resolver: ClientConfigResolver,
        event_logger: EventLogger,
        clock: Clock = current_time_ms,
        min_time_between_bad_ratings: int = settings.MIN_TIME_BETWEEN_BAD_RATINGS_MS,
        min_clip_success: int = settings.MIN_CLIP_SUCCESS_FOR_RATINGS_PROMPT,
        max_clip_success: int = settings.MAX_CLIP_SUCCESS_FOR_RATINGS_PROMPT,
        maximum_time_value: int = settings.MAXIMUM_TIME_VALUE_MS
    ):
        """
        Initialize eligibility engine.

        Args:
            storage: Key-value storage holding the ratings state
            config_resolver: Per-client settings lookups
            event_logger: Receives one event per evaluation
            clock: Current time in epoch milliseconds
            min_time_between_bad_ratings: Cooldown after a bad rating (ms)
            min_clip_success: Lowest successful clip count that allows the prompt
            max_clip_success: Highest successful clip count that allows the prompt
            maximum_time_value: Bound on valid epoch-ms dates
        """
        self.storage = storage
        self.config_resolver = config_resolver
        self.event_logger = event_logger
        self.clock = clock
        self.min_time_between_bad_ratings = min_time_between_bad_ratings
        self.min_clip_success = min_clip_success
        self.max_clip_success = max_clip_success
        self.maximum_time_value = maximum_time_value

    def pre_cache_needed_values(self) -> None:
        """Warm the storage cache with every key the evaluation reads."""
        self.storage.pre_cache_values(StorageKeys.ratings_prompt_keys())

    def should_show_ratings_prompt(self, session: Optional[RatingsSession]) -> bool:
        """
        Decide whether to show the prompt, caching the answer on the session.

        Args:
            session: Current session state (None is logged as a failure)

        Returns:
            True if the prompt should be shown
        """
        event = LogEvent(label=EventLabel.SHOULD_SHOW_RATINGS_PROMPT)
        info = RatingsLoggingInfo()

        should_show = self._evaluate(session, event, info)

        event.set_custom_property(PropertyName.SHOULD_SHOW_RATINGS_PROMPT, should_show)
        event.set_custom_property(PropertyName.RATINGS_INFO, json.dumps(info.to_dict()))
        try:
            self.event_logger.log_event(event)
        except Exception as e:
            logger.error(f"Failed to emit {event.label} event: {e}")

        return should_show

    def _evaluate(
        self,
        session: Optional[RatingsSession],
        event: LogEvent,
        info: RatingsLoggingInfo
    ) -> bool:
        if session is None:
            logger.error(f"Cannot evaluate ratings prompt: {MISSING_SESSION_ERROR}")
            event.set_status(EventStatus.FAILED)
            event.set_failure_info({"error": MISSING_SESSION_ERROR})
            return False

        if session.has_decision():
            info.used_cached_value = True
            logger.debug(f"Using cached ratings prompt decision for session {session.session_id}")
            return session.show_ratings_prompt

        decision = self._compute(session, info)
        session.cache_decision(decision)

        logger.info(
            f"Ratings prompt decision for {client_type_name(session.client_type)} "
            f"(session {session.session_id}): {decision}"
        )
        return decision

    def _compute(self, session: RatingsSession, info: RatingsLoggingInfo) -> bool:
        enabled = self.config_resolver.ratings_prompt_enabled_for_client(session.client_type)
        info.ratings_prompt_enabled_for_client = enabled
        if not enabled:
            return False

        record = self._read_stored_record()

        if record.do_not_prompt_ratings:
            info.do_not_prompt_ratings = True
            return False

        info.last_bad_rating_date = self._format_date(record.last_bad_rating_date)
        info.last_bad_rating_version = record.last_bad_rating_version
        info.last_seen_version = record.last_seen_version
        info.num_successful_clips = record.num_successful_clips

        # All three are evaluated so the event always carries every outcome
        timing_over = timing_delay_is_over(
            record.last_bad_rating_date,
            self.clock(),
            min_interval=self.min_time_between_bad_ratings,
            maximum_time_value=self.maximum_time_value
        )
        version_over = version_delay_is_over(
            record.last_bad_rating_version,
            record.last_seen_version
        )
        clips_over = usage_count_delay_is_over(
            record.num_successful_clips,
            min_clips=self.min_clip_success,
            max_clips=self.max_clip_success
        )

        info.bad_rating_timing_delay_is_over = timing_over
        info.bad_rating_version_delay_is_over = version_over
        info.clip_success_delay_is_over = clips_over

        return timing_over and version_over and clips_over

    def _read_stored_record(self) -> StoredRatingRecord:
        raw = {
            key: self.storage.get_cached_value(key)
            for key in StorageKeys.ratings_prompt_keys()
        }
        return StoredRatingRecord.from_storage(raw)

    def _format_date(self, date: Optional[int]) -> Optional[str]:
        if not is_valid_date(date, self.maximum_time_value):
            return None
        try:
            return datetime.fromtimestamp(date / 1000, tz=timezone.utc).isoformat()
        except (OverflowError, ValueError, OSError):
            # Valid epoch-ms values can lie outside datetime's year range
            return str(date)
