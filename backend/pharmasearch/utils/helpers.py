"""Common utility functions."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def current_year() -> int:
    """Calendar year used as the default upper bound of year filters."""
    return utc_now().year
