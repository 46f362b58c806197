"""
Calendar-day helpers.

Every comparison in the booking flow works on calendar days, never on
instants, so values are truncated to `datetime.date` at the boundary.
"""
import datetime
from typing import Iterator, Union

DateLike = Union[datetime.date, datetime.datetime, str]


def to_date_only(value: DateLike) -> datetime.date:
    """Truncate a date, datetime or ISO string to its calendar day."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        # "2025-06-01" and "2025-06-01T18:30:00" both resolve to June 1st
        return datetime.date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Cannot convert {type(value).__name__} to a calendar date")


def days_between(start: datetime.date, end: datetime.date) -> Iterator[datetime.date]:
    """Yield every calendar day from start to end, both inclusive."""
    # Offsets from start, so the walk never steps past date.max
    for offset in range((end - start).days + 1):
        yield start + datetime.timedelta(days=offset)


def nights_between(start: datetime.date, end: datetime.date) -> int:
    return (end - start).days
