"""DateTime utilities for the scoring engine.

This module provides the timezone handling used to compute submission
completion times. Naive datetimes are always interpreted as UTC.
"""

from datetime import datetime, timezone


def normalize_datetime_to_utc(dt: datetime) -> datetime:
    """Normalize datetime to UTC timezone.

    Args:
        dt: Datetime to normalize, naive values are assumed to be UTC

    Returns:
        UTC datetime

    Examples:
        >>> normalize_datetime_to_utc(datetime(2024, 1, 15, 14, 30))
        datetime.datetime(2024, 1, 15, 14, 30, tzinfo=datetime.timezone.utc)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def calculate_duration_ms(start_time: datetime, end_time: datetime) -> int:
    """Calculate duration between two timestamps in milliseconds.

    Args:
        start_time: Start timestamp
        end_time: End timestamp

    Returns:
        int: Signed duration in whole milliseconds

    Examples:
        >>> start = datetime(2024, 1, 15, 10, 0, 0)
        >>> end = datetime(2024, 1, 15, 10, 30, 15)
        >>> calculate_duration_ms(start, end)
        1815000
    """
    duration = normalize_datetime_to_utc(end_time) - normalize_datetime_to_utc(start_time)
    return (duration.days * 86_400_000) + (duration.seconds * 1000) + (duration.microseconds // 1000)


def format_duration(milliseconds: int) -> str:
    """Format a duration in a human-readable form.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Formatted duration string

    Examples:
        >>> format_duration(45_000)
        '45s'
        >>> format_duration(5_430_000)
        '1h 30m'
    """
    seconds = int(milliseconds // 1000)
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        minutes, rest = divmod(seconds, 60)
        return f"{minutes}m {rest}s" if rest else f"{minutes}m"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if minutes:
        return f"{hours}h {minutes}m"
    return f"{hours}h"
