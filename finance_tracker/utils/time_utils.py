"""Helpers for timestamp formatting."""

from datetime import datetime, timezone


def format_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string with milliseconds.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc_value = value.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["format_timestamp"]
