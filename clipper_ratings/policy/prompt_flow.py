"""
Ratings prompt flow.

Moves the prompt through its stages as the user answers it.
"""

import logging
from enum import Enum

from clipper_ratings.models.session import RatingsSession
from clipper_ratings.policy.bad_rating import BadRatingRecorder
from clipper_ratings.policy.client_config import ClientConfigResolver
from clipper_ratings.policy.eligibility import RatingsPromptEngine
from clipper_ratings.protocols import Clock
from clipper_ratings.utils.clock import current_time_ms

logger = logging.getLogger(__name__)


class RatingsPromptStage(Enum):
    NONE = "None"
    INIT = "Init"
    RATE = "Rate"
    FEEDBACK = "Feedback"
    END = "End"


class RatingsPromptFlow:
    """
    Stage transitions:
      NONE  - prompt not shown this session
      INIT  - asking "do you enjoy the clipper?"
      RATE  - happy user, offer the store rating page
      FEEDBACK - unhappy user, offer the feedback page
      END   - thank the user, nothing more to offer
    """

    def __init__(
        self,
        engine: RatingsPromptEngine,
        recorder: BadRatingRecorder,
        config_resolver: ClientConfigResolver,
        clock: Clock = current_time_ms
    ):
        self.engine = engine
        self.recorder = recorder
        self.config_resolver = config_resolver
        self.clock = clock

    def initial_stage(self, session: RatingsSession) -> RatingsPromptStage:
        if self.engine.should_show_ratings_prompt(session):
            return RatingsPromptStage.INIT
        return RatingsPromptStage.NONE

    def on_positive_response(self, session: RatingsSession) -> RatingsPromptStage:
        """User likes the clipper: never ask again, then offer the rate page if any."""
        self.recorder.set_do_not_prompt_status()

        if self.config_resolver.get_rate_url_if_exists(session.client_type):
            return RatingsPromptStage.RATE
        return RatingsPromptStage.END

    def on_negative_response(self, session: RatingsSession) -> RatingsPromptStage:
        """
        User dislikes the clipper: record the bad rating.
        A second bad rating stops the prompt for good.
        """
        already_rated_badly = self.recorder.set_last_bad_rating(
            str(self.clock()),
            session.client_version
        )
        if already_rated_badly:
            logger.info("Repeat bad rating, disabling the ratings prompt")
            self.recorder.set_do_not_prompt_status()

        if self.config_resolver.get_feedback_url_if_exists(session):
            return RatingsPromptStage.FEEDBACK
        return RatingsPromptStage.END
