"""
Pytest configuration for PawStay tests
"""
import pytest
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Ensure pawstay is importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from pawstay.models import HostSettings
from pawstay.services.booking_service import BookingService
from pawstay.services.settings_service import SettingsService
from pawstay.services.store import InMemoryBookingStore

TODAY = date(2025, 5, 1)


class RecordingNotifier:
    """Collects notified bookings instead of sending anything"""

    def __init__(self):
        self.sent = []

    async def notify(self, booking):
        self.sent.append(booking)


class FailingNotifier:
    async def notify(self, booking):
        raise RuntimeError("mail server unreachable")


@pytest.fixture
def host_settings():
    return HostSettings(
        base_rate=Decimal("50"),
        holiday_rate=Decimal("75"),
        host_name="Tianyi",
        host_location="Seattle, WA",
        host_bio="Dog lover with a big backyard.",
        requirements=["Must be fully vaccinated"],
    )


@pytest.fixture
def store(host_settings):
    return InMemoryBookingStore(host_settings)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def booking_service(store, notifier):
    return BookingService(store, notifier, today=lambda: TODAY)


@pytest.fixture
def settings_service(store):
    return SettingsService(store)


@pytest.fixture
def sample_booking_data():
    """Sample data for a booking request"""
    return {
        'guest_name': 'Test Guest',
        'guest_phone': '(555) 123-4567',
        'message': 'Max is a friendly golden retriever.',
        'start_date': date(2025, 6, 1),
        'end_date': date(2025, 6, 4),
    }
