"""
Storage utility.

Local JSON-file key-value storage for the ratings state.
"""

import json
import os
import logging
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class JsonKeyValueStorage:
    """
    String key-value store persisted as one JSON object.

    Reads are served from an in-memory cache filled by pre_cache_values;
    a key that was never cached reads as None.
    """

    def __init__(self, data_root: str, filename: str = "storage.json"):
        """
        Initialize storage.

        Args:
            data_root: Root data directory (e.g., /path/to/data)
            filename: Name of the JSON file under data_root
        """
        self.data_root = data_root
        self.filepath = os.path.join(data_root, filename)
        self._cache: Dict[str, Optional[str]] = {}

        os.makedirs(data_root, exist_ok=True)

        logger.info(f"Initialized JsonKeyValueStorage at {self.filepath}")

    def pre_cache_values(self, keys: List[str]) -> None:
        """
        Load keys from disk into the read cache.

        Args:
            keys: Storage keys to cache (missing keys cache as None)
        """
        stored = self._load_all()
        for key in keys:
            self._cache[key] = stored.get(key)
        logger.debug(f"Pre-cached {len(keys)} keys from {self.filepath}")

    def get_cached_value(self, key: str) -> Optional[str]:
        return self._cache.get(key)

    def set_value(self, key: str, value: str) -> None:
        """
        Write a value through to disk and update the cache.

        Args:
            key: Storage key
            value: String-encoded value
        """
        stored = self._load_all()
        stored[key] = value

        try:
            with open(self.filepath, 'w') as f:
                json.dump(stored, f, indent=2)
            logger.debug(f"Saved {key} to {self.filepath}")
        except Exception as e:
            logger.error(f"Failed to save {key} to {self.filepath}: {e}")
            raise

        self._cache[key] = value

    def _load_all(self) -> Dict[str, str]:
        if not os.path.exists(self.filepath):
            logger.debug(f"No storage file at {self.filepath}, starting empty")
            return {}

        try:
            with open(self.filepath, 'r') as f:
                data = json.load(f)
        except Exception as e:
            logger.error(f"Failed to load storage from {self.filepath}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.filepath} is not a JSON object, ignoring it")
            return {}

        # Values are always strings at the storage boundary
        return {key: str(value) for key, value in data.items() if value is not None}
