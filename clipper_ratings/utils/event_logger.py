"""
Event logger.

Emits diagnostic events through the logging module and, optionally,
appends them to a JSON-lines file for later reporting.
"""

import json
import os
import logging
from typing import List, Optional

from clipper_ratings.models.event import EventStatus, LogEvent

logger = logging.getLogger(__name__)


class LoggingEventLogger:
    """
    Local sink for diagnostic events.
    """

    def __init__(self, events_path: Optional[str] = None):
        """
        Args:
            events_path: JSON-lines file to append events to (None to only log)
        """
        self.events_path = events_path
        if events_path:
            os.makedirs(os.path.dirname(events_path) or ".", exist_ok=True)

    def log_event(self, event: LogEvent) -> None:
        line = json.dumps(event.to_dict())

        if event.status == EventStatus.FAILED:
            logger.warning(f"Event {event.label} failed: {line}")
        else:
            logger.info(f"Event {event.label}: {line}")

        if not self.events_path:
            return

        try:
            with open(self.events_path, 'a') as f:
                f.write(line + "\n")
        except Exception as e:
            logger.error(f"Failed to append event {event.label} to {self.events_path}: {e}")
            raise


def load_events(events_path: str) -> List[LogEvent]:
    """
    Load events written by LoggingEventLogger.

    Returns:
        Events in file order; empty if the file doesn't exist.
        Unparseable lines are skipped.
    """
    if not os.path.exists(events_path):
        logger.warning(f"No events file found at {events_path}")
        return []

    events = []
    with open(events_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                events.append(LogEvent.from_dict(json.loads(line)))
            except (json.JSONDecodeError, KeyError, ValueError) as e:
                logger.warning(f"Skipping invalid event on line {line_number} of {events_path}: {e}")
                continue

    logger.debug(f"Loaded {len(events)} events from {events_path}")
    return events
