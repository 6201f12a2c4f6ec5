"""Error types and handlers for the API layer.

Every error response has the ErrorResponse shape: {"name", "message"}.
Unhandled exceptions are turned into a 500 by the request logging
middleware, which also logs them.
"""

from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from razzies.models.types import ErrorResponse


class InvalidQueryParameterError(ValueError):
    """A query parameter could not be parsed or is out of range."""


def _error_response(status_code: int, name: str, message: str) -> JSONResponse:
    body = ErrorResponse(name=name, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def internal_error_response() -> JSONResponse:
    """Generic 500 body; never exposes exception details."""
    return _error_response(500, "INTERNAL_SERVER_ERROR", "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the application."""

    @app.exception_handler(InvalidQueryParameterError)
    async def invalid_query_parameter(request: Request, exc: InvalidQueryParameterError):
        return _error_response(400, type(exc).__name__, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation(request: Request, exc: RequestValidationError):
        messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
        return _error_response(400, "RequestValidationError", "; ".join(messages))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception(request: Request, exc: StarletteHTTPException):
        try:
            name = HTTPStatus(exc.status_code).phrase
        except ValueError:
            name = "HTTPException"
        return _error_response(exc.status_code, name, str(exc.detail))
