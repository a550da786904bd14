"""Request logging middleware using ContextVar.

Takes the request ID from the X-Request-ID header (or generates one) and
stores it in a ContextVar so that any downstream code (stores, exception
handlers, log records) sees it without explicit parameter passing. Every
request is logged once with status and timing. Errors no exception handler
claimed are logged here, while the request ID is still set, and answered
with the generic 500 body.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from api.errors import internal_error_response
from core.observability.logging_setup import request_id_var

logger = logging.getLogger("api.access")

REQUEST_ID_HEADER = "X-Request-ID"


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a request ID, time the request and write one access log line.

    Paths in ``skip_paths`` (health checks) still get an ID but are not logged.
    """

    def __init__(self, app, skip_paths: tuple[str, ...] = ("/health",)):
        super().__init__(app)
        self.skip_paths = skip_paths

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(request_id)
        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Unhandled error on %s %s", request.method, request.url.path
                )
                response = internal_error_response()
            response.headers[REQUEST_ID_HEADER] = request_id
            if request.url.path not in self.skip_paths:
                logger.info(
                    '"%s %s" %d %.2fms',
                    request.method,
                    request.url.path,
                    response.status_code,
                    (time.perf_counter() - start) * 1000,
                )
            return response
        finally:
            request_id_var.reset(token)
