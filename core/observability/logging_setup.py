"""Logging setup.

Standard-library logging configured once at startup. Every record carries
the current request ID (held in a ContextVar set by the request middleware)
so lines from one request can be correlated.
"""
import logging
import os
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Attach the active request ID to each record as ``request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger.

    Level comes from the argument, then LOG_LEVEL, then INFO. Calling this
    again replaces the handler installed by a previous call.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if any(isinstance(f, RequestIdFilter) for f in existing.filters):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level_name)
