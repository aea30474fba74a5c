"""Collaborator interfaces used by the ratings policy.

The engine never touches files or the network itself. Storage, settings and
event emission are supplied by the host client; `clipper_ratings.utils` holds
local implementations used by the CLI.
"""

from typing import Callable, List, Optional, Protocol, runtime_checkable

from clipper_ratings.models.event import LogEvent

# Returns the current time as epoch milliseconds
Clock = Callable[[], int]


@runtime_checkable
class KeyValueStorage(Protocol):
    """String key-value storage with a pre-warmed read cache."""

    def get_cached_value(self, key: str) -> Optional[str]:
        """Return the cached value for key, or None if never recorded."""
        ...

    def set_value(self, key: str, value: str) -> None:
        ...

    def pre_cache_values(self, keys: List[str]) -> None:
        """Load keys into the read cache. Synchronous once it returns."""
        ...


@runtime_checkable
class SettingsProvider(Protocol):
    """Read-only client settings."""

    def get_setting(self, name: str) -> Optional[str]:
        ...


@runtime_checkable
class EventLogger(Protocol):
    """Sink for diagnostic events."""

    def log_event(self, event: LogEvent) -> None:
        ...
