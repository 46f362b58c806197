import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware

from pawstay.core.logging import setup_logging
from pawstay.core.rate_limiter import limiter
from pawstay.middleware.request_logger import RequestLoggerMiddleware
from pawstay.services.notification_service import LoggingNotifier, Notifier
from pawstay.services.store import BookingStore, InMemoryBookingStore

from pawstay.api.health import router as health_router
from pawstay.web.routers import admin, public

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[BookingStore] = None,
    notifier: Optional[Notifier] = None,
) -> FastAPI:
    app = FastAPI(
        title="PawStay",
        description="Booking requests and host dashboard for a pet sitter",
        version="0.1.0",
    )

    # -------------------------------------------------
    # Collaborators
    # -------------------------------------------------
    app.state.store = store or InMemoryBookingStore()
    app.state.notifier = notifier or LoggingNotifier()

    # -------------------------------------------------
    # Rate Limiting (slowapi)
    # -------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestLoggerMiddleware)

    app.include_router(health_router)
    app.include_router(public.router)
    app.include_router(admin.router)

    return app


setup_logging()
logger.info("Starting application")

app = create_app()
