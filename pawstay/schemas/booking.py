from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from pawstay.models import BookingStatus


class StaySelection(BaseModel):
    # Both ends optional: the date picker sends partial selections too
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class QuoteOut(BaseModel):
    nights: int
    total: Decimal
    applied_rate: Decimal
    is_holiday_stay: bool
    available: bool
    error: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class BookingRequestCreate(StaySelection):
    guest_name: str = Field(min_length=2, max_length=120)
    guest_phone: str = Field(min_length=7, max_length=32)
    message: str = Field(default="", max_length=2000)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingOut(BaseModel):
    id: int
    guest_name: str
    guest_phone: str
    message: str
    start_date: date
    end_date: date
    nights: int
    total_price: Decimal
    status: BookingStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConfirmedRangeOut(BaseModel):
    start_date: date
    end_date: date


class AvailabilityOut(BaseModel):
    confirmed_ranges: list[ConfirmedRangeOut]
    blocked_dates: list[date]
    holiday_dates: list[date]
    base_rate: Decimal
    holiday_rate: Decimal
