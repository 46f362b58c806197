from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from pawstay.core.config import settings
from pawstay.core.messages import messages
from pawstay.core.rate_limiter import limiter
from pawstay.domain.availability import DateRange, RangeRejected
from pawstay.schemas.booking import (
    AvailabilityOut,
    BookingOut,
    BookingRequestCreate,
    ConfirmedRangeOut,
    QuoteOut,
    StaySelection,
)
from pawstay.schemas.settings import ProfileOut
from pawstay.services.booking_service import BookingService, InvalidSelection
from pawstay.services.settings_service import SettingsService
from pawstay.web.deps import get_booking_service, get_settings_service

router = APIRouter(tags=["public"])


@router.get("/profile", response_model=ProfileOut)
async def get_profile(service: SettingsService = Depends(get_settings_service)):
    host = await service.get_settings()
    return ProfileOut.model_validate(host)


@router.get("/availability", response_model=AvailabilityOut)
async def get_availability(service: BookingService = Depends(get_booking_service)):
    """Snapshot the booking calendar needs to grey out unavailable days."""
    blocked, schedule = await service.build_snapshot()
    return AvailabilityOut(
        confirmed_ranges=[
            ConfirmedRangeOut(start_date=r.start, end_date=r.end)
            for r in sorted(blocked.confirmed_ranges, key=lambda r: r.start)
        ],
        blocked_dates=sorted(blocked.blocked_dates),
        holiday_dates=sorted(schedule.holiday_dates),
        base_rate=schedule.base_rate,
        holiday_rate=schedule.holiday_rate,
    )


@router.post("/quote", response_model=QuoteOut)
@limiter.limit(settings.rate_limit_quote)
async def quote_selection(
    request: Request,
    payload: StaySelection,
    service: BookingService = Depends(get_booking_service),
):
    preview = await service.preview(DateRange.of(payload.start_date, payload.end_date))
    return QuoteOut(
        nights=preview.quote.nights,
        total=preview.quote.total,
        applied_rate=preview.quote.applied_rate,
        is_holiday_stay=preview.quote.is_holiday_stay,
        available=preview.available,
        error=preview.error,
    )


@router.post(
    "/booking-requests",
    response_model=BookingOut,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.rate_limit_booking)
async def create_booking_request(
    request: Request,
    payload: BookingRequestCreate,
    service: BookingService = Depends(get_booking_service),
):
    try:
        booking = await service.create_request(payload.model_dump())
    except RangeRejected:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=messages.RANGE_UNAVAILABLE
        )
    except InvalidSelection as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return BookingOut.model_validate(booking)


@router.get("/my-bookings", response_model=list[BookingOut])
async def my_bookings(
    phone: str = Query(min_length=7, max_length=32),
    service: BookingService = Depends(get_booking_service),
):
    bookings = await service.bookings_for_phone(phone)
    return [BookingOut.model_validate(b) for b in bookings]
