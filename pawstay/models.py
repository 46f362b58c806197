from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pawstay.core.config import settings
from pawstay.domain.availability import DateRange


class BookingStatus(str, Enum):
    PENDING = "pending"  # Waiting for the host
    CONFIRMED = "confirmed"  # Occupies the calendar
    REJECTED = "rejected"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Booking:
    guest_name: str
    guest_phone: str
    start_date: date
    end_date: date
    total_price: Decimal = Decimal("0.00")
    message: str = ""
    status: BookingStatus = BookingStatus.PENDING
    id: Optional[int] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def stay(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    @property
    def nights(self) -> int:
        return self.stay.nights


@dataclass
class HostSettings:
    base_rate: Decimal
    holiday_rate: Decimal
    holidays: List[date] = field(default_factory=list)
    blocked_dates: List[date] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    host_name: str = ""
    host_location: str = ""
    host_bio: str = ""

    @classmethod
    def defaults(cls) -> "HostSettings":
        return cls(
            base_rate=settings.default_base_rate,
            holiday_rate=settings.default_holiday_rate,
            host_name=settings.host_name,
            host_location=settings.host_location,
            host_bio=settings.host_bio,
        )
