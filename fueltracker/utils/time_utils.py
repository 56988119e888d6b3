"""
Date/time helpers for FuelTracker.

SQLite hands back naive datetimes while API payloads usually carry an
offset, so everything stored is normalized to naive UTC:
- utc_now() returns naive UTC time
- normalize_datetime() converts aware datetimes to naive UTC
- parse_datetime() accepts ISO strings, plain dates and Unix timestamps
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """
    Get current UTC time as a naive datetime.

    Returns:
        Current UTC time without tzinfo
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_datetime(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to naive UTC for safe comparisons.

    Examples:
        >>> aware = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        >>> normalize_datetime(aware)
        datetime.datetime(2024, 1, 1, 12, 0)
    """
    if dt is None:
        return None

    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)

    return dt


def parse_datetime(date_string, default: Optional[datetime] = None) -> Optional[datetime]:
    """
    Parse a date/time string into a naive UTC datetime.

    Supports:
    - ISO 8601: "2024-01-15T14:30:00Z"
    - Date only: "2024-01-15"
    - Unix timestamp: "1705329000"

    Returns:
        datetime, or default if parsing fails

    Examples:
        >>> parse_datetime("2024-01-15")
        datetime.datetime(2024, 1, 15, 0, 0)
        >>> parse_datetime("not a date") is None
        True
    """
    if isinstance(date_string, datetime):
        return normalize_datetime(date_string)

    if not date_string or not isinstance(date_string, str):
        return default

    date_string = date_string.strip()

    if date_string.isdigit():
        try:
            return normalize_datetime(datetime.fromtimestamp(int(date_string), tz=timezone.utc))
        except (ValueError, OverflowError, OSError):
            pass

    try:
        return normalize_datetime(date_parser.parse(date_string))
    except (ValueError, TypeError, OverflowError):
        pass

    logger.warning(f"Failed to parse datetime string: {date_string}")
    return default


def current_year_month() -> Tuple[int, int]:
    """Return (year, month) of the current UTC date."""
    now = utc_now()
    return now.year, now.month
