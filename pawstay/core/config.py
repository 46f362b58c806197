import os
from decimal import Decimal
from dotenv import load_dotenv
from pydantic import BaseModel

# Load variables from .env
load_dotenv()


class Settings(BaseModel):
    # Pricing defaults used until the host saves their own settings
    default_base_rate: Decimal = Decimal("50")
    default_holiday_rate: Decimal = Decimal("75")
    currency_symbol: str = "$"

    # Host profile defaults
    host_name: str = "Your Sitter"
    host_location: str = ""
    host_bio: str = ""

    # Booking rules
    max_stay_nights: int = 365

    # Rate limiting settings
    rate_limit_enabled: bool = True  # Killswitch for quick disable
    rate_limit_booking: str = "10/minute"  # Per client IP on the public request form
    rate_limit_quote: str = "120/minute"  # Date-picker previews fire on every change

    # Logging settings
    log_format: str = "console"  # Options: "console", "json"
    log_level: str = "INFO"  # Root and uvicorn loggers
    log_level_booking: str = "INFO"  # pawstay.* loggers
    log_slow_request_threshold_ms: int = 500  # Log timing only if duration > threshold


settings = Settings(
    default_base_rate=Decimal(os.environ.get("DEFAULT_BASE_RATE", "50")),
    default_holiday_rate=Decimal(os.environ.get("DEFAULT_HOLIDAY_RATE", "75")),
    currency_symbol=os.environ.get("CURRENCY_SYMBOL", "$"),
    host_name=os.environ.get("HOST_NAME", "Your Sitter"),
    host_location=os.environ.get("HOST_LOCATION", ""),
    host_bio=os.environ.get("HOST_BIO", ""),
    max_stay_nights=int(os.environ.get("MAX_STAY_NIGHTS", "365")),
    rate_limit_enabled=os.environ.get("RATE_LIMIT_ENABLED", "true").lower() == "true",
    rate_limit_booking=os.environ.get("RATE_LIMIT_BOOKING", "10/minute"),
    rate_limit_quote=os.environ.get("RATE_LIMIT_QUOTE", "120/minute"),
    log_format=os.environ.get("LOG_FORMAT", "console"),
    log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    log_level_booking=os.environ.get(
        "LOG_LEVEL_BOOKING", os.environ.get("LOG_LEVEL", "INFO")
    ).upper(),
    log_slow_request_threshold_ms=int(
        os.environ.get("LOG_SLOW_REQUEST_THRESHOLD_MS", "500")
    ),
)
