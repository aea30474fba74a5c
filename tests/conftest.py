"""
Shared fixtures: in-memory collaborators that record how they were used.
"""

import pytest

from clipper_ratings.models.client import ClientType
from clipper_ratings.models.session import RatingsSession
from clipper_ratings.policy.bad_rating import BadRatingRecorder
from clipper_ratings.policy.client_config import ClientConfigResolver
from clipper_ratings.policy.eligibility import RatingsPromptEngine
from clipper_ratings.utils.settings_store import JsonSettingsProvider


class CountingStorage:
    """Dict-backed storage that records every read and write."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.reads = []
        self.writes = []
        self.pre_cached = []

    def get_cached_value(self, key):
        self.reads.append(key)
        return self.values.get(key)

    def set_value(self, key, value):
        self.writes.append((key, value))
        self.values[key] = value

    def pre_cache_values(self, keys):
        self.pre_cached.extend(keys)


class RecordingEventLogger:
    def __init__(self):
        self.events = []

    def log_event(self, event):
        self.events.append(event)


@pytest.fixture
def now_ms():
    return 1_700_000_000_000


@pytest.fixture
def storage():
    return CountingStorage()


@pytest.fixture
def event_logger():
    return RecordingEventLogger()


@pytest.fixture
def settings_provider():
    """Ratings enabled for the Chrome extension; tests edit .values as needed."""
    return JsonSettingsProvider({"ChromeExtension_RatingsEnabled": "true"})


@pytest.fixture
def resolver(settings_provider):
    return ClientConfigResolver(
        settings_provider,
        feedback_base_url="https://example.com/feedback"
    )


@pytest.fixture
def engine(storage, resolver, event_logger, now_ms):
    return RatingsPromptEngine(
        storage,
        resolver,
        event_logger,
        clock=lambda: now_ms,
        min_clip_success=3,
        max_clip_success=10
    )


@pytest.fixture
def recorder(storage, event_logger):
    return BadRatingRecorder(storage, event_logger)


@pytest.fixture
def session():
    return RatingsSession(client_type=ClientType.ChromeExtension, client_version="3.4.1")
