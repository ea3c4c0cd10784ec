"""Timestamps as stored in the service databases."""

from datetime import datetime


def now_iso() -> str:
    """Current local time as an ISO 8601 string with millisecond precision.

    A fixed precision keeps stored values sortable as plain text.
    """
    return datetime.now().isoformat(timespec="milliseconds")
