"""
Unit tests for the diagnostics report.
"""

import json
import os
import tempfile

import pandas as pd

from clipper_ratings.models.client import ClientType
from clipper_ratings.models.session import RatingsSession
from clipper_ratings.models.stored_record import StorageKeys
from clipper_ratings.policy.bad_rating import BadRatingRecorder
from clipper_ratings.policy.client_config import ClientConfigResolver
from clipper_ratings.policy.eligibility import RatingsPromptEngine
from clipper_ratings.reporting.diagnostics_report import REPORT_COLUMNS, DiagnosticsReport
from clipper_ratings.utils.event_logger import LoggingEventLogger
from clipper_ratings.utils.settings_store import JsonSettingsProvider


def _log_evaluations(events_path, storage):
    event_logger = LoggingEventLogger(events_path)
    resolver = ClientConfigResolver(JsonSettingsProvider({"ChromeExtension_RatingsEnabled": "true"}))
    engine = RatingsPromptEngine(storage, resolver, event_logger, clock=lambda: 1_700_000_000_000)

    session = RatingsSession(client_type=ClientType.ChromeExtension, client_version="3.4.1")
    engine.should_show_ratings_prompt(session)
    engine.should_show_ratings_prompt(session)
    engine.should_show_ratings_prompt(None)
    BadRatingRecorder(storage, event_logger).set_do_not_prompt_status()


def test_report_flattens_evaluations(storage):
    """Test one report row per evaluation event."""
    storage.values[StorageKeys.NUM_SUCCESSFUL_CLIPS] = "5"

    with tempfile.TemporaryDirectory() as tmpdir:
        events_path = os.path.join(tmpdir, "events.jsonl")
        _log_evaluations(events_path, storage)

        df = DiagnosticsReport(events_path).build_table()

        assert list(df.columns) == REPORT_COLUMNS
        assert len(df) == 3  # SetDoNotPromptRatings is not an evaluation
        assert bool(df.iloc[0]["shouldShowRatingsPrompt"])
        assert df.iloc[0]["numSuccessfulClips"] == 5
        assert bool(df.iloc[1]["usedCachedValue"])
        assert df.iloc[2]["status"] == "Failed"
        assert df.iloc[2]["error"] == "session state is missing"


def test_generate_writes_csv_and_metadata(storage):
    """Test CSV and metadata output."""
    storage.values[StorageKeys.NUM_SUCCESSFUL_CLIPS] = "5"

    with tempfile.TemporaryDirectory() as tmpdir:
        events_path = os.path.join(tmpdir, "events.jsonl")
        _log_evaluations(events_path, storage)

        output_dir = os.path.join(tmpdir, "output")
        output_path = DiagnosticsReport(events_path).generate(output_dir)

        assert os.path.exists(output_path)
        assert len(pd.read_csv(output_path)) == 3

        with open(os.path.join(output_dir, "ratings_diagnostics_metadata.json")) as f:
            metadata = json.load(f)

        assert metadata["total_evaluations"] == 3
        assert metadata["prompt_shown"] == 2
        assert metadata["failed"] == 1
        assert metadata["used_cached_value"] == 1


def test_empty_report_has_known_columns():
    """Test the empty report keeps its columns."""
    with tempfile.TemporaryDirectory() as tmpdir:
        report = DiagnosticsReport(os.path.join(tmpdir, "events.jsonl"))
        df = report.build_table()

        assert df.empty
        assert list(df.columns) == REPORT_COLUMNS

        output_path = report.generate(os.path.join(tmpdir, "output"))
        assert os.path.exists(output_path)
