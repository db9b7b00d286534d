"""
DateTime utilities for unix-second timestamps
"""
import time
from datetime import datetime, timezone


def now_unix() -> int:
    """
    Get current time as unix seconds
    """
    return int(time.time())


def to_unix(dt: datetime) -> int:
    """
    Convert a datetime to unix seconds (naive datetimes are treated as UTC)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def parse_unix(value: str) -> int:
    """
    Parse an ISO-8601 string into unix seconds
    """
    return to_unix(datetime.fromisoformat(value))
