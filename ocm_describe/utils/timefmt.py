"""Timestamp and duration formatting."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def round_to_second(value: datetime) -> datetime:
    """Round a timestamp to the nearest second, halves rounding up."""
    rounded = value.replace(microsecond=0)
    if value.microsecond >= 500000:
        rounded += timedelta(seconds=1)
    return rounded


def format_rfc3339(value: Optional[datetime], default: str = "") -> str:
    """Format a timestamp as RFC 3339, using ``Z`` for UTC.

    Naive timestamps are assumed to be UTC. Fractional seconds are dropped.
    """
    if value is None:
        return default

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    text = value.strftime("%Y-%m-%dT%H:%M:%S")

    offset = value.utcoffset()
    if not offset:
        return text + "Z"

    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_duration(delta: timedelta) -> str:
    """Format a duration truncated to whole minutes, e.g. ``26h5m0s``.

    Hours are not folded into days and a zero duration prints as ``0s``.
    """
    total_minutes = int(delta.total_seconds() // 60) if delta > timedelta(0) else 0
    hours, minutes = divmod(total_minutes, 60)

    if hours:
        return f"{hours}h{minutes}m0s"
    if minutes:
        return f"{minutes}m0s"
    return "0s"
