"""
Parsing helpers for string-encoded stored values.
"""

import re
from typing import Optional

# Leading base-10 integer; anything after the digits is ignored ("1-beta" -> 1)
_LEADING_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading base-10 integer of a string.

    Returns:
        The integer, or None if value is absent or does not start with an integer
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None

    match = _LEADING_INTEGER_PATTERN.match(value)
    if not match:
        return None
    return int(match.group(1), 10)


def parse_bool_flag(value: Optional[str]) -> bool:
    """Stored booleans are the literals "true"/"false", compared case-insensitively."""
    return value is not None and str(value).lower() == "true"
