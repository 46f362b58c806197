import re
import time
import logging
import uuid
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from pawstay.core.config import settings
from pawstay.core.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
# Ids coming from a proxy or the booking widget are reused only if they look sane
VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and VALID_REQUEST_ID.match(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Binds a request id to every log line written while the request runs
    (booking requests, host decisions, notifications), echoes it back in
    X-Request-ID, and logs slow or failed requests.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        status_code = 500
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            extra = {
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 2),
            }
            if status_code >= 500:
                logger.error(
                    f"{request.method} {request.url.path} failed with {status_code}",
                    extra=extra,
                )
            elif duration_ms > settings.log_slow_request_threshold_ms:
                logger.info(
                    f"Slow request: {request.method} {request.url.path} "
                    f"took {duration_ms:.2f}ms",
                    extra=extra,
                )
            request_id_var.reset(token)
