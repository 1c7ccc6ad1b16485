"""Formatting callbacks shared by report columns."""

from datetime import datetime
from zoneinfo import ZoneInfo


def userdate(value, row, fmt: str, tz: str = "UTC") -> str:
    """Format an epoch timestamp; empty or zero renders as an empty string."""
    if not value:
        return ""
    return datetime.fromtimestamp(int(value), tz=ZoneInfo(tz)).strftime(fmt)
