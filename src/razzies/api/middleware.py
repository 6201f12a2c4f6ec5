"""Request logging middleware.

Logs the start and end of each HTTP request with a request id, taken
from the caller's headers when present. The id is echoed back in the
x-request-id response header, error responses included.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request

from razzies.api.errors import internal_error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADERS = ("x-request-id", "x-correlation-id", "idempotency-key")


def get_request_id(request: Request) -> str:
    """Return the caller's request id, or a fresh UUID4."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return str(uuid.uuid4())


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logging middleware to the application."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = get_request_id(request)
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query": dict(request.query_params),
        }

        logger.info("Request started", extra=context)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("Unhandled error", exc_info=exc, extra=context)
            response = internal_error_response()
        else:
            if response.status_code >= 500:
                logger.error("Server error", extra={**context, "status": response.status_code})
            elif response.status_code >= 400:
                logger.warning("Client error", extra={**context, "status": response.status_code})

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "Request completed",
            extra={**context, "status": response.status_code, "duration_ms": duration_ms},
        )
        response.headers["x-request-id"] = request_id
        return response
