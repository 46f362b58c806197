import logging
from datetime import date
from decimal import Decimal

from pawstay.models import HostSettings
from pawstay.services.store import BookingStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("base_rate", "holiday_rate", "host_name", "host_location", "host_bio")


class SettingsService:
    """Host-editable pricing, calendar and profile settings"""

    def __init__(self, store: BookingStore):
        self.store = store

    async def get_settings(self) -> HostSettings:
        return await self.store.get_settings()

    async def update_settings(self, data: dict) -> HostSettings:
        """
        Partial update. Keys outside the editable set and None values are
        ignored; rates must stay non-negative.
        """
        host = await self.store.get_settings()

        for key in EDITABLE_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if key in ("base_rate", "holiday_rate"):
                value = Decimal(str(value))
                if value < 0:
                    raise ValueError(f"{key} must be non-negative")
            setattr(host, key, value)

        saved = await self.store.save_settings(host)
        logger.info(
            f"Settings saved: base_rate={saved.base_rate}, holiday_rate={saved.holiday_rate}"
        )
        return saved

    async def add_holiday(self, day: date) -> HostSettings:
        host = await self.store.get_settings()
        if day in host.holidays:
            return host
        host.holidays = sorted([*host.holidays, day])
        return await self.store.save_settings(host)

    async def remove_holiday(self, day: date) -> HostSettings:
        host = await self.store.get_settings()
        host.holidays = [h for h in host.holidays if h != day]
        return await self.store.save_settings(host)

    async def add_blocked_date(self, day: date) -> HostSettings:
        host = await self.store.get_settings()
        if day in host.blocked_dates:
            return host
        host.blocked_dates = sorted([*host.blocked_dates, day])
        return await self.store.save_settings(host)

    async def remove_blocked_date(self, day: date) -> HostSettings:
        host = await self.store.get_settings()
        host.blocked_dates = [d for d in host.blocked_dates if d != day]
        return await self.store.save_settings(host)

    async def add_requirement(self, text: str) -> HostSettings:
        host = await self.store.get_settings()
        text = text.strip()
        if not text:
            return host
        host.requirements = [*host.requirements, text]
        return await self.store.save_settings(host)

    async def remove_requirement(self, index: int) -> HostSettings:
        host = await self.store.get_settings()
        if not 0 <= index < len(host.requirements):
            return host
        host.requirements = [r for i, r in enumerate(host.requirements) if i != index]
        return await self.store.save_settings(host)
