"""Date/time helpers shared by the store and the aggregation functions.

All timestamps handled by the tracking domain are naive datetimes in the
device's local time, matching how the mobile app reasons about "today".
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Union


def to_local_naive(dt: datetime) -> datetime:
    """Normalize a datetime to naive local time.

    Aware datetimes are converted to the local timezone before the tzinfo
    is dropped; naive datetimes are assumed to already be local.

    Examples:
        >>> to_local_naive(datetime(2025, 10, 21, 8, 30))
        datetime.datetime(2025, 10, 21, 8, 30)
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 timestamp (``Z`` suffix accepted) to naive local time."""
    if isinstance(value, datetime):
        return to_local_naive(value)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return to_local_naive(datetime.fromisoformat(value))


def start_of_day(dt: datetime) -> datetime:
    """Midnight at the start of ``dt``'s calendar day."""
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(dt: datetime) -> datetime:
    """Midnight of the most recent Sunday (``dt`` itself if it is a Sunday)."""
    days_since_sunday = (dt.weekday() + 1) % 7
    return start_of_day(dt) - timedelta(days=days_since_sunday)


def sunday_index(dt: Union[date, datetime]) -> int:
    """Day index with 0 = Sunday .. 6 = Saturday."""
    return (dt.weekday() + 1) % 7


def shift_months(dt: datetime, months: int) -> datetime:
    """Move ``dt`` by whole calendar months, clamping the day to the month length.

    Examples:
        >>> shift_months(datetime(2025, 3, 31, 9), -1)
        datetime.datetime(2025, 2, 28, 9, 0)
    """
    month_index = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)


def same_day(a: datetime, b: datetime) -> bool:
    """True if both timestamps fall on the same calendar day."""
    return a.date() == b.date()
