from pawstay.core.config import settings


class Messages:
    """
    Centralized store for user-facing messages.
    Uses settings for dynamic content.
    """

    @property
    def RANGE_UNAVAILABLE(self) -> str:
        return "Selected range includes unavailable dates."

    @property
    def RANGE_MISSING(self) -> str:
        return "Please select a date range."

    @property
    def RANGE_NOT_POSITIVE(self) -> str:
        return "Check-out must be after check-in."

    @property
    def RANGE_IN_PAST(self) -> str:
        return "Check-in date cannot be in the past."

    @property
    def RANGE_TOO_LONG(self) -> str:
        return f"Stays are limited to {settings.max_stay_nights} nights."

    @property
    def BOOKING_NOT_FOUND(self) -> str:
        return "Booking not found."

    def invalid_transition(self, current: str, target: str) -> str:
        return f"Cannot change booking status from '{current}' to '{target}'."


messages = Messages()
