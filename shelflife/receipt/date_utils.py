"""Date helpers for purchase timestamps and expiry estimates."""

from datetime import date, datetime, timedelta
from typing import TypeVar

DateT = TypeVar("DateT", date, datetime)


def add_days(value: DateT, days: int) -> DateT:
    """Return ``value`` advanced by whole calendar days, keeping the time of day.

    Works on naive local values; month/year rollover and leap years follow
    the Gregorian calendar. The input is not modified.
    """
    return value + timedelta(days=days)


def fallback_purchase_datetime(now: datetime | None = None) -> datetime:
    """Return a placeholder purchase timestamp for receipts without a date."""
    if now is not None:
        return now
    return datetime.now().replace(microsecond=0)
