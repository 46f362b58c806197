"""
Storage seam for bookings and host settings.

Persistence lives in an external backend; services talk to it only
through `BookingStore`. `InMemoryBookingStore` backs the dev server and
the test suite.
"""
import asyncio
import copy
import logging
from datetime import datetime, timezone
from typing import List, Optional, Protocol

from pawstay.models import Booking, BookingStatus, HostSettings

logger = logging.getLogger(__name__)


class BookingStore(Protocol):
    # Serializes host decisions within this process. A shared backend must
    # also make the confirm write conditional (e.g. an exclusion constraint
    # on confirmed ranges), since several workers can decide at once.
    decision_lock: asyncio.Lock

    async def get_settings(self) -> HostSettings: ...

    async def save_settings(self, host_settings: HostSettings) -> HostSettings: ...

    async def insert_booking(self, booking: Booking) -> Booking: ...

    async def get_booking(self, booking_id: int) -> Optional[Booking]: ...

    async def update_booking_status(
        self, booking_id: int, status: BookingStatus
    ) -> Optional[Booking]: ...

    async def list_bookings(
        self, status: Optional[BookingStatus] = None
    ) -> List[Booking]: ...


class InMemoryBookingStore:
    """Process-local store. Returns copies so callers never share records."""

    def __init__(self, host_settings: Optional[HostSettings] = None):
        self._settings = host_settings or HostSettings.defaults()
        self._bookings: dict[int, Booking] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        self.decision_lock = asyncio.Lock()

    async def get_settings(self) -> HostSettings:
        return copy.deepcopy(self._settings)

    async def save_settings(self, host_settings: HostSettings) -> HostSettings:
        async with self._lock:
            self._settings = copy.deepcopy(host_settings)
        return copy.deepcopy(self._settings)

    async def insert_booking(self, booking: Booking) -> Booking:
        async with self._lock:
            stored = copy.deepcopy(booking)
            stored.id = self._next_id
            self._next_id += 1
            self._bookings[stored.id] = stored
        logger.debug(f"Stored booking #{stored.id}")
        return copy.deepcopy(stored)

    async def get_booking(self, booking_id: int) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        return copy.deepcopy(booking) if booking else None

    async def update_booking_status(
        self, booking_id: int, status: BookingStatus
    ) -> Optional[Booking]:
        async with self._lock:
            booking = self._bookings.get(booking_id)
            if not booking:
                return None
            booking.status = status
            booking.updated_at = datetime.now(timezone.utc)
        return copy.deepcopy(booking)

    async def list_bookings(
        self, status: Optional[BookingStatus] = None
    ) -> List[Booking]:
        bookings = [
            b for b in self._bookings.values() if status is None or b.status == status
        ]
        # Newest first; id breaks ties between same-instant inserts
        bookings.sort(key=lambda b: (b.created_at, b.id), reverse=True)
        return [copy.deepcopy(b) for b in bookings]
