import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

from pawstay.core.config import settings

# Set by RequestLoggerMiddleware for the duration of one HTTP request
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(request_id)s %(message)s"


_base_record_factory = logging.getLogRecordFactory()


def _record_factory(*args, **kwargs) -> logging.LogRecord:
    """Stamps every record with the id of the request being served"""
    record = _base_record_factory(*args, **kwargs)
    record.request_id = request_id_var.get()
    return record


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging() -> None:
    level = _level(settings.log_level)
    logging.setLogRecordFactory(_record_factory)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)

    if settings.log_format.lower() == "json":
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT, json_ensure_ascii=False)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Booking flow can be turned up to DEBUG without flooding uvicorn output
    logging.getLogger("pawstay").setLevel(_level(settings.log_level_booking))
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
