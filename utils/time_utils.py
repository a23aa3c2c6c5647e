"""
utils/time_utils.py

Purpose: Timestamp utilities

- Timezone-aware "now" for record timestamps
- Display formatting
"""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Returns the current time as a timezone-aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def format_timestamp(dt: Optional[datetime], format_str: str = "%Y-%m-%d %H:%M:%S") -> str:
    """
    Formats a datetime object to string.
    """
    if not dt:
        return "N/A"
    return dt.strftime(format_str)
