"""
Timestamp formatting

Every formatted timestamp is rendered in UTC as ``YYYY-MM-DD HH:MM:SS``.
"""

import math
import re
import time
from datetime import datetime, timezone
from typing import Optional, Union

TimestampValue = Union[str, int, float, None]

NOT_AVAILABLE = "N/A"
TIME_FORMAT = "%H:%M:%S"

# Larger values are read as epoch milliseconds (10^11 s is past year 5000)
MILLISECONDS_THRESHOLD = 10 ** 11

SECONDS_PER_DAY = 24 * 60 * 60

_NUMERIC_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def _to_datetime(value: TimestampValue) -> Optional[datetime]:
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if not _NUMERIC_RE.match(text):
            parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
        value = float(text)

    seconds = float(value)
    if not math.isfinite(seconds):
        return None
    if abs(seconds) > MILLISECONDS_THRESHOLD:
        seconds /= 1000
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_timestamp(value: TimestampValue) -> str:
    """
    Format a timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC.

    Args:
        value: Epoch seconds or milliseconds (number or numeric string), or
            an ISO-8601 string. Naive ISO strings are read as UTC.

    Returns:
        Formatted date, or "N/A" when the value cannot be parsed

    Example:
        >>> format_timestamp(1707307200)
        '2024-02-07 12:00:00'
        >>> format_timestamp("2024-02-07T12:00:00Z")
        '2024-02-07 12:00:00'
    """
    try:
        parsed = _to_datetime(value)
        if parsed is None:
            return NOT_AVAILABLE
        utc = parsed.astimezone(timezone.utc)
    except (ValueError, TypeError, OverflowError, OSError):
        return NOT_AVAILABLE
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d} {utc.strftime(TIME_FORMAT)}"


def get_current_timestamp() -> int:
    """Current Unix timestamp in whole seconds"""
    return int(time.time())


def get_time_ago(days: float) -> int:
    """
    Unix timestamp a given number of days before now.

    Args:
        days: Whole or fractional number of days

    Returns:
        Timestamp in whole seconds
    """
    return get_current_timestamp() - math.floor(days * SECONDS_PER_DAY)


def get_24_hours_ago() -> int:
    """Unix timestamp 24 hours before now"""
    return get_time_ago(1)
