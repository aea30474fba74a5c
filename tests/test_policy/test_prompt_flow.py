"""
Unit tests for the ratings prompt flow.
"""

import pytest
from unittest.mock import Mock

from clipper_ratings.models.stored_record import StorageKeys
from clipper_ratings.policy.prompt_flow import RatingsPromptFlow, RatingsPromptStage


@pytest.fixture
def flow(engine, recorder, resolver, now_ms):
    return RatingsPromptFlow(engine, recorder, resolver, clock=lambda: now_ms)


def test_initial_stage_follows_engine(flow, storage, session):
    """Test that an eligible session starts at INIT."""
    storage.values[StorageKeys.NUM_SUCCESSFUL_CLIPS] = "5"

    assert flow.initial_stage(session) == RatingsPromptStage.INIT


def test_initial_stage_none_when_not_eligible(flow, session):
    """Test that an ineligible session starts at NONE."""
    assert flow.initial_stage(session) == RatingsPromptStage.NONE


def test_positive_response_goes_to_rate_page(flow, storage, settings_provider, session):
    """Test that a positive answer leads to the rate page."""
    settings_provider.values["ChromeExtension_RatingUrl"] = "https://store.example.com/clipper"

    assert flow.on_positive_response(session) == RatingsPromptStage.RATE
    assert storage.values[StorageKeys.DO_NOT_PROMPT_RATINGS] == "true"


def test_positive_response_without_rate_url_ends(flow, storage, session):
    """Test that a positive answer ends when no rate URL exists."""
    assert flow.on_positive_response(session) == RatingsPromptStage.END
    assert storage.values[StorageKeys.DO_NOT_PROMPT_RATINGS] == "true"


def test_first_negative_response_records_bad_rating(flow, storage, settings_provider, session, now_ms):
    """Test that a first negative answer records the bad rating."""
    settings_provider.values["LogCategory_RatingsPrompt"] = "RatingsPrompt"

    assert flow.on_negative_response(session) == RatingsPromptStage.FEEDBACK
    assert storage.values[StorageKeys.LAST_BAD_RATING_DATE] == str(now_ms)
    assert storage.values[StorageKeys.LAST_BAD_RATING_VERSION] == "3.4.1"
    assert StorageKeys.DO_NOT_PROMPT_RATINGS not in storage.values


def test_repeat_negative_response_stops_prompting(flow, storage, session):
    """Test that a repeat negative answer stops prompting."""
    storage.values[StorageKeys.LAST_BAD_RATING_DATE] = "1600000000000"

    assert flow.on_negative_response(session) == RatingsPromptStage.END
    assert storage.values[StorageKeys.DO_NOT_PROMPT_RATINGS] == "true"


def test_invalid_client_version_stops_prompting(engine, resolver, session):
    """Test that a rejected bad rating stops prompting."""
    recorder = Mock()
    recorder.set_last_bad_rating.return_value = True
    flow = RatingsPromptFlow(engine, recorder, resolver, clock=lambda: 1)
    session.client_version = "dev"

    flow.on_negative_response(session)

    recorder.set_last_bad_rating.assert_called_once_with("1", "dev")
    recorder.set_do_not_prompt_status.assert_called_once()
