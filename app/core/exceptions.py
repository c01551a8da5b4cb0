"""
Global exception handling for the application.
Every error response carries a stable machine-readable code plus a message.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundException(AppError):
    """Resource not found error."""

    code = "NOT_FOUND"

    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Unique key already taken."""

    code = "CONFLICT"

    def __init__(self, message: str = "Conflict", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""

    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class ForbiddenException(AppError):
    """Authorization failure error."""

    code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


def _error_body(code: str, message: str, path: str, details: Optional[Dict[str, Any]] = None) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "path": path,
        }
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Translate a typed application error to its status and code."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedException) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, request.url.path, exc.details),
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing request fields become a 400."""
    errors = exc.errors()
    message = "Validation failed"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    fields = [
        {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg")}
        for e in errors
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("VALIDATION_ERROR", message, request.url.path, {"errors": fields}),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    logger.exception("Unhandled error", path=request.url.path, method=request.method)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR",
            "An unexpected error occurred. Please try again later.",
            request.url.path,
        ),
    )


def register_exception_handlers(app) -> None:
    """Attach every handler to the FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
