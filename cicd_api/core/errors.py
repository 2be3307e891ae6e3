"""Error envelope and the error-handling chain for the API."""

import logging
from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found"


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.RESOURCE_NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class ErrorBody(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    error: ErrorBody


class ApiError(Exception):
    """Fault raised by a handler that declares its own HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


def error_body(message: str) -> dict:
    """Build the ``{"error": {"message": ...}}`` envelope."""
    return ErrorEnvelope(error=ErrorBody(message=message)).model_dump()


def error_response(
    kind: ErrorKind,
    message: str,
    status_code: Optional[int] = None,
) -> JSONResponse:
    """
    Render an error envelope.

    Args:
        kind: Error category, used for the default status
        message: Text placed in ``error.message``
        status_code: Explicit status overriding the category default

    Returns:
        JSONResponse carrying the envelope
    """
    status = status_code if status_code is not None else STATUS_BY_KIND[kind]
    return JSONResponse(status_code=status, content=error_body(message))


def fault_status(exc: BaseException) -> int:
    """Return the status an exception declares, or 500."""
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool) and 300 <= value <= 599:
            return value
    return 500


def fault_response(exc: BaseException) -> JSONResponse:
    """Turn an uncaught handler fault into an error envelope."""
    # Message passes through unsanitized
    return error_response(ErrorKind.INTERNAL, str(exc), status_code=fault_status(exc))


def install_error_handlers(app: FastAPI) -> None:
    """
    Wire the dispatch error chain onto an application.

    Handler faults are caught by an outer middleware and rendered with their
    declared status. Routing misses, including a known path requested with
    an unsupported method, fall through to the Not Found envelope.
    """

    @app.middleware("http")
    async def fault_boundary(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
            return fault_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Routing misses: unknown path (404) or known path with another method (405)
        if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == NOT_FOUND_MESSAGE):
            return error_response(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
        return error_response(ErrorKind.INTERNAL, str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(ErrorKind.INTERNAL, "Invalid request", status_code=422)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.error(f"API error on {request.method} {request.url.path}: {exc.message}")
        return fault_response(exc)
