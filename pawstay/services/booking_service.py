import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from pawstay.core.config import settings
from pawstay.core.messages import messages
from pawstay.domain.availability import (
    BlockedSet,
    DateRange,
    Quote,
    RangeRejected,
    RateSchedule,
    quote,
    validate_selection,
)
from pawstay.models import Booking, BookingStatus
from pawstay.services.notification_service import Notifier
from pawstay.services.store import BookingStore
from pawstay.utils.phone import phones_match

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base class for user-correctable booking failures"""


class InvalidSelection(BookingError):
    pass


class BookingNotFound(BookingError):
    pass


class InvalidStatusTransition(BookingError):
    pass


@dataclass(frozen=True)
class SelectionPreview:
    quote: Quote
    available: bool
    error: Optional[str] = None


class BookingService:
    """Booking request flow on top of the availability engine"""

    ALLOWED_TRANSITIONS = {
        BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.REJECTED},
        BookingStatus.CONFIRMED: set(),
        BookingStatus.REJECTED: set(),
    }

    def __init__(
        self,
        store: BookingStore,
        notifier: Notifier,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.notifier = notifier
        self.today = today

    @classmethod
    def can_transition(cls, current: BookingStatus, target: BookingStatus) -> bool:
        return target in cls.ALLOWED_TRANSITIONS.get(current, set())

    async def build_snapshot(self) -> Tuple[BlockedSet, RateSchedule]:
        """
        Load host settings and confirmed bookings and freeze them
        into the inputs the availability engine works on.
        """
        host = await self.store.get_settings()
        confirmed = await self.store.list_bookings(BookingStatus.CONFIRMED)

        blocked = BlockedSet.from_snapshot(
            confirmed_ranges=[b.stay for b in confirmed],
            blocked_dates=host.blocked_dates,
        )
        schedule = RateSchedule.from_snapshot(
            base_rate=host.base_rate,
            holiday_rate=host.holiday_rate,
            holiday_dates=host.holidays,
        )
        return blocked, schedule

    async def preview(self, candidate: Optional[DateRange]) -> SelectionPreview:
        """Price and availability for the current date-picker selection."""
        blocked, schedule = await self.build_snapshot()
        if candidate is not None and candidate.nights > settings.max_stay_nights:
            # Keeps the day-by-day walk bounded on the public endpoint
            return SelectionPreview(
                quote=quote(None, schedule),
                available=False,
                error=messages.RANGE_TOO_LONG,
            )
        try:
            validate_selection(candidate, blocked)
        except RangeRejected:
            return SelectionPreview(
                quote=quote(None, schedule),
                available=False,
                error=messages.RANGE_UNAVAILABLE,
            )
        return SelectionPreview(quote=quote(candidate, schedule), available=True)

    def _check_submittable(self, candidate: Optional[DateRange]) -> DateRange:
        if candidate is None or not candidate.is_complete:
            raise InvalidSelection(messages.RANGE_MISSING)
        if candidate.end <= candidate.start:
            raise InvalidSelection(messages.RANGE_NOT_POSITIVE)
        if candidate.start < self.today():
            raise InvalidSelection(messages.RANGE_IN_PAST)
        if candidate.nights > settings.max_stay_nights:
            raise InvalidSelection(messages.RANGE_TOO_LONG)
        return candidate

    async def create_request(self, data: dict) -> Booking:
        """
        Validate the selection, price it and store a pending request.

        Raises InvalidSelection or RangeRejected; the host notification
        is best-effort and never fails the request.
        """
        candidate = self._check_submittable(
            DateRange.of(data.get("start_date"), data.get("end_date"))
        )

        blocked, schedule = await self.build_snapshot()
        try:
            validate_selection(candidate, blocked)
        except RangeRejected:
            logger.warning(
                f"Rejected request {candidate.start} - {candidate.end}: "
                f"range includes unavailable dates"
            )
            raise

        stay_quote = quote(candidate, schedule)
        booking = await self.store.insert_booking(
            Booking(
                guest_name=data["guest_name"].strip(),
                guest_phone=data["guest_phone"].strip(),
                message=(data.get("message") or "").strip(),
                start_date=candidate.start,
                end_date=candidate.end,
                total_price=stay_quote.total.quantize(Decimal("0.01")),
                status=BookingStatus.PENDING,
            )
        )
        logger.info(
            f"Booking request #{booking.id} created: {booking.start_date} - "
            f"{booking.end_date}, {stay_quote.nights} nights, total {booking.total_price}"
        )

        await self._safe_notify(booking)
        return booking

    async def _safe_notify(self, booking: Booking) -> None:
        try:
            await self.notifier.notify(booking)
        except Exception as e:
            logger.error(
                f"Notification for booking #{booking.id} failed: {e}", exc_info=True
            )

    async def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        """Host decision on a pending request"""
        # The overlap check and the write must not interleave with another decision
        async with self.store.decision_lock:
            booking = await self.store.get_booking(booking_id)
            if not booking:
                raise BookingNotFound(messages.BOOKING_NOT_FOUND)

            if not self.can_transition(booking.status, status):
                raise InvalidStatusTransition(
                    messages.invalid_transition(booking.status.value, status.value)
                )

            if status == BookingStatus.CONFIRMED:
                # Two confirmed stays must never share a day
                confirmed = await self.store.list_bookings(BookingStatus.CONFIRMED)
                others = BlockedSet.from_snapshot(
                    confirmed_ranges=[b.stay for b in confirmed if b.id != booking.id]
                )
                validate_selection(booking.stay, others)

            updated = await self.store.update_booking_status(booking_id, status)
            if not updated:
                raise BookingNotFound(messages.BOOKING_NOT_FOUND)

        logger.info(f"Booking #{booking_id} marked {status.value}")
        return updated

    async def list_bookings(
        self, status: Optional[BookingStatus] = None
    ) -> List[Booking]:
        return await self.store.list_bookings(status)

    async def bookings_for_phone(self, phone: str) -> List[Booking]:
        bookings = await self.store.list_bookings()
        return [b for b in bookings if phones_match(b.guest_phone, phone)]
