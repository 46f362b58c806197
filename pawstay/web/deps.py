from fastapi import Depends, Request

from pawstay.services.booking_service import BookingService
from pawstay.services.notification_service import Notifier
from pawstay.services.settings_service import SettingsService
from pawstay.services.store import BookingStore


def get_store(request: Request) -> BookingStore:
    return request.app.state.store


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_booking_service(
    store: BookingStore = Depends(get_store),
    notifier: Notifier = Depends(get_notifier),
) -> BookingService:
    return BookingService(store, notifier)


def get_settings_service(store: BookingStore = Depends(get_store)) -> SettingsService:
    return SettingsService(store)
