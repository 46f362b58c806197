import calendar as std_calendar
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from pawstay.domain.availability import RangeRejected
from pawstay.domain.calendar import WEEK_DAYS, CalendarBooking, build_month_view
from pawstay.models import BookingStatus
from pawstay.schemas.booking import BookingOut, BookingStatusUpdate
from pawstay.schemas.settings import (
    CalendarDayOut,
    CalendarMonthOut,
    HostSettingsOut,
    HostSettingsUpdate,
    RequirementCreate,
)
from pawstay.services.booking_service import (
    BookingNotFound,
    BookingService,
    InvalidStatusTransition,
)
from pawstay.services.settings_service import SettingsService
from pawstay.web.deps import get_booking_service, get_settings_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/bookings", response_model=list[BookingOut])
async def admin_list_bookings(
    status: Optional[BookingStatus] = Query(default=None),
    service: BookingService = Depends(get_booking_service),
):
    bookings = await service.list_bookings(status)
    return [BookingOut.model_validate(b) for b in bookings]


@router.patch("/bookings/{booking_id}", response_model=BookingOut)
async def admin_update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    try:
        booking = await service.update_status(booking_id, payload.status)
    except BookingNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except RangeRejected:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Dates overlap another confirmed booking.",
        )
    return BookingOut.model_validate(booking)


@router.get("/calendar/{year}/{month}", response_model=CalendarMonthOut)
async def admin_calendar(
    year: int = Path(ge=2000, le=2100),
    month: int = Path(ge=1, le=12),
    bookings: BookingService = Depends(get_booking_service),
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Month grid for the host dashboard: who is staying, blocked and holiday days."""
    confirmed = await bookings.list_bookings(BookingStatus.CONFIRMED)
    host = await settings_service.get_settings()

    weeks = build_month_view(
        year,
        month,
        bookings=[CalendarBooking(b.guest_name, b.stay) for b in confirmed],
        blocked_dates=host.blocked_dates,
        holiday_dates=host.holidays,
    )
    return CalendarMonthOut(
        year=year,
        month=month,
        title=f"{std_calendar.month_name[month]} {year}",
        week_days=WEEK_DAYS,
        weeks=[[CalendarDayOut.model_validate(cell) for cell in week] for week in weeks],
    )


@router.get("/settings", response_model=HostSettingsOut)
async def admin_get_settings(service: SettingsService = Depends(get_settings_service)):
    return HostSettingsOut.model_validate(await service.get_settings())


@router.patch("/settings", response_model=HostSettingsOut)
async def admin_update_settings(
    payload: HostSettingsUpdate,
    service: SettingsService = Depends(get_settings_service),
):
    host = await service.update_settings(payload.model_dump(exclude_none=True))
    return HostSettingsOut.model_validate(host)


@router.post("/settings/holidays/{day}", response_model=HostSettingsOut)
async def admin_add_holiday(
    day: date, service: SettingsService = Depends(get_settings_service)
):
    return HostSettingsOut.model_validate(await service.add_holiday(day))


@router.delete("/settings/holidays/{day}", response_model=HostSettingsOut)
async def admin_remove_holiday(
    day: date, service: SettingsService = Depends(get_settings_service)
):
    return HostSettingsOut.model_validate(await service.remove_holiday(day))


@router.post("/settings/blocked-dates/{day}", response_model=HostSettingsOut)
async def admin_add_blocked_date(
    day: date, service: SettingsService = Depends(get_settings_service)
):
    return HostSettingsOut.model_validate(await service.add_blocked_date(day))


@router.delete("/settings/blocked-dates/{day}", response_model=HostSettingsOut)
async def admin_remove_blocked_date(
    day: date, service: SettingsService = Depends(get_settings_service)
):
    return HostSettingsOut.model_validate(await service.remove_blocked_date(day))


@router.post("/settings/requirements", response_model=HostSettingsOut)
async def admin_add_requirement(
    payload: RequirementCreate,
    service: SettingsService = Depends(get_settings_service),
):
    return HostSettingsOut.model_validate(await service.add_requirement(payload.text))


@router.delete("/settings/requirements/{index}", response_model=HostSettingsOut)
async def admin_remove_requirement(
    index: int, service: SettingsService = Depends(get_settings_service)
):
    return HostSettingsOut.model_validate(await service.remove_requirement(index))
