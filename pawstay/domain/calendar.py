import calendar
import datetime
from dataclasses import dataclass, field
from typing import Iterable, List

from pawstay.domain.availability import DateRange
from pawstay.domain.dates import days_between

WEEK_DAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def get_month_dates(year: int, month: int) -> list[datetime.date]:
    _, days_in_month = calendar.monthrange(year, month)
    return [
        datetime.date(year, month, day)
        for day in range(1, days_in_month + 1)
    ]


def month_grid(year: int, month: int) -> list[list[datetime.date]]:
    """Sunday-first weeks covering the month, padded with neighbouring days."""
    dates = get_month_dates(year, month)
    first, last = dates[0], dates[-1]

    # date.weekday(): Monday == 0, shift so Sunday starts the week
    grid_start = first - datetime.timedelta(days=(first.weekday() + 1) % 7)
    grid_end = last + datetime.timedelta(days=(5 - last.weekday()) % 7)

    days = list(days_between(grid_start, grid_end))
    return [days[i:i + 7] for i in range(0, len(days), 7)]


@dataclass
class CalendarBooking:
    guest_name: str
    stay: DateRange


@dataclass
class DayCell:
    day: datetime.date
    in_month: bool
    is_today: bool = False
    blocked: bool = False
    holiday: bool = False
    guests: List[str] = field(default_factory=list)


def build_month_view(
    year: int,
    month: int,
    bookings: Iterable[CalendarBooking] = (),
    blocked_dates: Iterable[datetime.date] = (),
    holiday_dates: Iterable[datetime.date] = (),
    today: datetime.date | None = None,
) -> list[list[DayCell]]:
    today = today or datetime.date.today()
    bookings = list(bookings)
    blocked = set(blocked_dates)
    holidays = set(holiday_dates)

    weeks = []
    for week in month_grid(year, month):
        row = []
        for day in week:
            row.append(
                DayCell(
                    day=day,
                    in_month=day.month == month,
                    is_today=day == today,
                    blocked=day in blocked,
                    holiday=day in holidays,
                    # Checkout day still shows the guest
                    guests=[b.guest_name for b in bookings if b.stay.contains(day)],
                )
            )
        weeks.append(row)
    return weeks
