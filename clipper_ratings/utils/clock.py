"""
Clock helper.
"""

import time


def current_time_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)
