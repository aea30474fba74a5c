"""
Diagnostic event models.

Events emitted to the external logger, and the per-evaluation ratings info
attached to them.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class EventStatus(Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class EventLabel:
    SHOULD_SHOW_RATINGS_PROMPT = "ShouldShowRatingsPrompt"
    SET_DO_NOT_PROMPT_RATINGS = "SetDoNotPromptRatings"


class PropertyName:
    SHOULD_SHOW_RATINGS_PROMPT = "ShouldShowRatingsPrompt"
    RATINGS_INFO = "RatingsInfo"


@dataclass
class LogEvent:
    """
    One diagnostic event: a label, a status and named custom properties.
    """
    label: str
    status: EventStatus = EventStatus.SUCCEEDED
    custom_properties: Dict[str, Any] = field(default_factory=dict)
    failure_info: Optional[Dict[str, str]] = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def set_custom_property(self, name: str, value: Any) -> None:
        self.custom_properties[name] = value

    def set_status(self, status: EventStatus) -> None:
        self.status = status

    def set_failure_info(self, failure_info: Dict[str, str]) -> None:
        self.failure_info = failure_info

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        data = {
            "label": self.label,
            "status": self.status.value,
            "timestamp": self.timestamp,
            "custom_properties": self.custom_properties
        }
        if self.failure_info is not None:
            data["failure_info"] = self.failure_info
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "LogEvent":
        """Create LogEvent from JSON dict."""
        return cls(
            label=data["label"],
            status=EventStatus(data.get("status", EventStatus.SUCCEEDED.value)),
            custom_properties=data.get("custom_properties", {}),
            failure_info=data.get("failure_info"),
            timestamp=data.get("timestamp", "")
        )


@dataclass
class RatingsLoggingInfo:
    """
    What one eligibility evaluation saw and decided.
    Fields left as None were not reached and are omitted from the event.
    """
    used_cached_value: Optional[bool] = None
    ratings_prompt_enabled_for_client: Optional[bool] = None
    do_not_prompt_ratings: Optional[bool] = None
    last_bad_rating_date: Optional[str] = None  # ISO-8601 rendering of the stored date
    last_bad_rating_version: Optional[str] = None
    last_seen_version: Optional[str] = None
    num_successful_clips: Optional[int] = None
    bad_rating_timing_delay_is_over: Optional[bool] = None
    bad_rating_version_delay_is_over: Optional[bool] = None
    clip_success_delay_is_over: Optional[bool] = None

    def to_dict(self) -> dict:
        """Camel-cased keys, matching what the clients already log."""
        return {
            _camel_case(name): value
            for name, value in asdict(self).items()
            if value is not None
        }


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
