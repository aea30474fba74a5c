"""
Configuration settings for the clipper ratings prompt engine.

Centralized configuration for policy thresholds, setting names and local paths.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("CLIPPER_RATINGS_DATA_ROOT", str(PROJECT_ROOT / "data")))
OUTPUT_ROOT = Path(os.getenv("CLIPPER_RATINGS_OUTPUT_ROOT", str(PROJECT_ROOT / "output")))

# Local adapters
STORAGE_FILENAME = "storage.json"
EVENTS_FILENAME = "events.jsonl"
SETTINGS_PATH = Path(os.getenv("CLIPPER_RATINGS_SETTINGS", str(DATA_ROOT / "settings.json")))

# Bad rating cooldown: 12 weeks, in milliseconds
MIN_TIME_BETWEEN_BAD_RATINGS_MS = 1000 * 60 * 60 * 24 * 7 * 12

# Successful clip window (both bounds inclusive)
MIN_CLIP_SUCCESS_FOR_RATINGS_PROMPT = 4
MAX_CLIP_SUCCESS_FOR_RATINGS_PROMPT = 12

# Largest epoch-millisecond value a stored date may take (+/- 100,000,000 days)
MAXIMUM_TIME_VALUE_MS = 1000 * 60 * 60 * 24 * 100000000

# Per-client setting names are "<ClientType name><suffix>"
RATE_URL_SETTING_SUFFIX = "_RatingUrl"
RATINGS_ENABLED_SETTING_SUFFIX = "_RatingsEnabled"
RATINGS_PROMPT_LOG_CATEGORY_SETTING = "LogCategory_RatingsPrompt"

# Feedback page opened after a negative answer
FEEDBACK_BASE_URL = os.getenv("CLIPPER_RATINGS_FEEDBACK_URL", "https://www.onenote.com/feedback")

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "clipper_ratings.log"
