"""
Settings provider backed by a JSON object.
"""

import json
import os
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class JsonSettingsProvider:
    """
    Read-only client settings, e.g. {"ChromeExtension_RatingsEnabled": "true"}.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(values or {})

    @classmethod
    def from_file(cls, path: str) -> "JsonSettingsProvider":
        """
        Load settings from a JSON file.

        Returns:
            Provider with the file's settings, or an empty provider if the
            file does not exist
        """
        if not os.path.exists(path):
            logger.warning(f"No settings file found at {path}, all settings absent")
            return cls()

        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")

        logger.info(f"Loaded {len(data)} settings from {path}")
        return cls({name: str(value) for name, value in data.items() if value is not None})

    def get_setting(self, name: str) -> Optional[str]:
        return self.values.get(name)
