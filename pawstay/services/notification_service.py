import logging
from typing import Protocol

from pawstay.core.config import settings
from pawstay.models import Booking

logger = logging.getLogger(__name__)


def compose_request_message(booking: Booking) -> str:
    """Text the host receives for a new booking request"""
    lines = [
        "New Sitter Request!",
        f"Guest: {booking.guest_name}",
        f"Phone: {booking.guest_phone}",
        f"Dates: {booking.start_date:%b %d, %Y} to {booking.end_date:%b %d, %Y}",
        f"Total: {settings.currency_symbol}{booking.total_price:.2f}",
    ]
    if booking.message:
        lines.append(f"Message: {booking.message}")
    return "\n".join(lines)


class Notifier(Protocol):
    async def notify(self, booking: Booking) -> None: ...


class LoggingNotifier:
    """Writes host notifications to the application log"""

    async def notify(self, booking: Booking) -> None:
        logger.info(
            f"Host notification for booking #{booking.id}:\n"
            f"{compose_request_message(booking)}"
        )
