from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProfileOut(BaseModel):
    host_name: str
    host_location: str
    host_bio: str
    base_rate: Decimal
    holiday_rate: Decimal
    requirements: list[str]

    model_config = ConfigDict(from_attributes=True)


class HostSettingsOut(ProfileOut):
    holidays: list[date]
    blocked_dates: list[date]


class HostSettingsUpdate(BaseModel):
    base_rate: Optional[Decimal] = Field(default=None, ge=0)
    holiday_rate: Optional[Decimal] = Field(default=None, ge=0)
    host_name: Optional[str] = Field(default=None, max_length=120)
    host_location: Optional[str] = Field(default=None, max_length=200)
    host_bio: Optional[str] = Field(default=None, max_length=4000)


class RequirementCreate(BaseModel):
    text: str = Field(min_length=1, max_length=300)


class CalendarDayOut(BaseModel):
    day: date
    in_month: bool
    is_today: bool
    blocked: bool
    holiday: bool
    guests: list[str]

    model_config = ConfigDict(from_attributes=True)


class CalendarMonthOut(BaseModel):
    year: int
    month: int
    title: str
    week_days: list[str]
    weeks: list[list[CalendarDayOut]]
