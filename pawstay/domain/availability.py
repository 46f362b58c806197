"""
Availability and pricing for a candidate stay.

Everything here is a pure function of its arguments: callers load the
confirmed bookings and host settings first, freeze them into a
`BlockedSet` / `RateSchedule` snapshot and pass that in on every call.
"""
import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from typing import FrozenSet, Iterable, Optional, Tuple

from pawstay.domain.dates import DateLike, days_between, nights_between, to_date_only

UNAVAILABLE_REASON = "contains unavailable day"


class RangeRejected(Exception):
    """Candidate range contains at least one unavailable day."""

    def __init__(self, reason: str = UNAVAILABLE_REASON):
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class DateRange:
    """
    Check-in/checkout pair as picked in the calendar.

    Either end may be missing while the guest is still choosing. A range
    whose end is before its start is kept as-is and treated as inert.
    """

    start: Optional[datetime.date] = None
    end: Optional[datetime.date] = None

    @classmethod
    def of(cls, start: Optional[DateLike], end: Optional[DateLike]) -> "DateRange":
        return cls(
            start=to_date_only(start) if start is not None else None,
            end=to_date_only(end) if end is not None else None,
        )

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def nights(self) -> int:
        if not self.is_complete:
            return 0
        return max(nights_between(self.start, self.end), 0)

    def contains(self, day: datetime.date) -> bool:
        """Inclusive of both endpoints: checkout day is still occupied."""
        if not self.is_complete:
            return False
        return self.start <= day <= self.end


@dataclass(frozen=True)
class BlockedSet:
    confirmed_ranges: Tuple[DateRange, ...] = ()
    blocked_dates: FrozenSet[datetime.date] = field(default_factory=frozenset)

    @classmethod
    def from_snapshot(
        cls,
        confirmed_ranges: Iterable[DateRange] = (),
        blocked_dates: Iterable[DateLike] = (),
    ) -> "BlockedSet":
        return cls(
            confirmed_ranges=tuple(confirmed_ranges),
            blocked_dates=frozenset(to_date_only(d) for d in blocked_dates),
        )


@dataclass(frozen=True)
class RateSchedule:
    base_rate: Decimal
    holiday_rate: Decimal
    holiday_dates: FrozenSet[datetime.date] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.base_rate < 0 or self.holiday_rate < 0:
            raise ValueError("Nightly rates must be non-negative")

    @classmethod
    def from_snapshot(
        cls,
        base_rate,
        holiday_rate,
        holiday_dates: Iterable[DateLike] = (),
    ) -> "RateSchedule":
        return cls(
            base_rate=Decimal(str(base_rate)),
            holiday_rate=Decimal(str(holiday_rate)),
            holiday_dates=frozenset(to_date_only(d) for d in holiday_dates),
        )


@dataclass(frozen=True)
class Quote:
    nights: int
    total: Decimal
    applied_rate: Decimal
    is_holiday_stay: bool


def is_day_blocked(day: datetime.date, blocked: BlockedSet) -> bool:
    if day in blocked.blocked_dates:
        return True
    return any(r.contains(day) for r in blocked.confirmed_ranges)


def has_overlap(candidate: Optional[DateRange], blocked: BlockedSet) -> bool:
    """
    Walk every day of the candidate (both ends inclusive) and stop at the
    first unavailable one. Absent or partial selections never overlap.
    """
    if candidate is None or not candidate.is_complete:
        return False

    for day in days_between(candidate.start, candidate.end):
        if is_day_blocked(day, blocked):
            return True
    return False


def quote(candidate: Optional[DateRange], schedule: RateSchedule) -> Quote:
    """
    Price a stay. One holiday night surcharges the whole stay:
    total is nights * holiday_rate, never a per-night blend.
    """
    if candidate is None or not candidate.is_complete:
        return _zero_quote(schedule)

    nights = nights_between(candidate.start, candidate.end)
    if nights <= 0:
        return _zero_quote(schedule)

    # Checkout day is not a night
    last_night = candidate.start + datetime.timedelta(days=nights - 1)
    is_holiday_stay = any(
        day in schedule.holiday_dates
        for day in days_between(candidate.start, last_night)
    )

    rate = schedule.holiday_rate if is_holiday_stay else schedule.base_rate
    return Quote(
        nights=nights,
        total=rate * nights,
        applied_rate=rate,
        is_holiday_stay=is_holiday_stay,
    )


def validate_selection(
    candidate: Optional[DateRange], blocked: BlockedSet
) -> Optional[DateRange]:
    """Return the candidate unchanged, or raise RangeRejected."""
    if has_overlap(candidate, blocked):
        raise RangeRejected()
    return candidate


def _zero_quote(schedule: RateSchedule) -> Quote:
    return Quote(
        nights=0,
        total=Decimal("0"),
        applied_rate=schedule.base_rate,
        is_holiday_stay=False,
    )
