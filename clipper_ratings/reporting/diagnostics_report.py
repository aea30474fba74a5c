"""
Diagnostics Report.

Flattens logged ratings prompt evaluations into a CSV table.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict

import pandas as pd

from clipper_ratings.models.event import EventLabel, EventStatus, LogEvent, PropertyName
from clipper_ratings.utils.event_logger import load_events

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "timestamp",
    "status",
    "error",
    "shouldShowRatingsPrompt",
    "usedCachedValue",
    "ratingsPromptEnabledForClient",
    "doNotPromptRatings",
    "lastBadRatingDate",
    "lastBadRatingVersion",
    "lastSeenVersion",
    "numSuccessfulClips",
    "badRatingTimingDelayIsOver",
    "badRatingVersionDelayIsOver",
    "clipSuccessDelayIsOver",
]


class DiagnosticsReport:
    """
    Builds a table of ShouldShowRatingsPrompt events, one row per evaluation.
    """

    def __init__(self, events_path: str):
        """
        Args:
            events_path: JSON-lines file written by LoggingEventLogger
        """
        self.events_path = events_path

    def build_table(self) -> pd.DataFrame:
        rows = [
            self._to_row(event)
            for event in load_events(self.events_path)
            if event.label == EventLabel.SHOULD_SHOW_RATINGS_PROMPT
        ]

        if not rows:
            logger.warning("No ratings prompt evaluations found, creating empty table")
            return pd.DataFrame(columns=REPORT_COLUMNS)

        return pd.DataFrame(rows, columns=REPORT_COLUMNS)

    def generate(self, output_dir: str = "output") -> str:
        """
        Write the evaluation table and a summary next to it.

        Args:
            output_dir: Directory to save CSV output

        Returns:
            Path to generated CSV file
        """
        df = self.build_table()

        os.makedirs(output_dir, exist_ok=True)
        output_path = os.path.join(output_dir, "ratings_diagnostics.csv")
        df.to_csv(output_path, index=False)

        logger.info(f"Diagnostics table saved to {output_path} ({len(df)} evaluations)")

        metadata_path = os.path.join(output_dir, "ratings_diagnostics_metadata.json")
        with open(metadata_path, 'w') as f:
            json.dump(self.summarize(df), f, indent=2)

        logger.info(f"Metadata saved to {metadata_path}")

        return output_path

    def summarize(self, df: pd.DataFrame) -> Dict:
        if df.empty:
            shown = failed = cached = 0
        else:
            shown = int(df["shouldShowRatingsPrompt"].eq(True).sum())
            failed = int(df["status"].eq(EventStatus.FAILED.value).sum())
            cached = int(df["usedCachedValue"].eq(True).sum())

        return {
            "events_path": self.events_path,
            "total_evaluations": len(df),
            "prompt_shown": shown,
            "failed": failed,
            "used_cached_value": cached,
            "generated_at": datetime.now(timezone.utc).isoformat()
        }

    def _to_row(self, event: LogEvent) -> Dict:
        row = {
            "timestamp": event.timestamp,
            "status": event.status.value,
            "error": (event.failure_info or {}).get("error"),
            "shouldShowRatingsPrompt": event.custom_properties.get(
                PropertyName.SHOULD_SHOW_RATINGS_PROMPT
            )
        }

        raw_info = event.custom_properties.get(PropertyName.RATINGS_INFO)
        if raw_info:
            try:
                info = json.loads(raw_info)
            except json.JSONDecodeError as e:
                logger.warning(f"Unreadable {PropertyName.RATINGS_INFO} at {event.timestamp}: {e}")
                info = {}
            for column in REPORT_COLUMNS:
                if column in info:
                    row[column] = info[column]

        return row
