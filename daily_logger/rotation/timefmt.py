"""
Timestamp helpers for file naming

All names are derived from UTC so that the generator and the scanner
always agree on the calendar day.
"""

from datetime import datetime, timezone
from typing import Optional


def to_utc(timestamp: Optional[datetime] = None) -> datetime:
    """
    Normalize a timestamp to an aware UTC datetime.

    Args:
        timestamp: Aware or naive datetime. Naive values are taken as UTC.
                   None means the current wall-clock time.

    Returns:
        Aware datetime in UTC
    """
    if timestamp is None:
        return datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(timezone.utc)


def format_timestamp(timestamp: Optional[datetime], pattern: str) -> str:
    """Format the UTC form of ``timestamp`` with a strftime pattern."""
    return to_utc(timestamp).strftime(pattern)
