"""
Middleware configuration for the application.
Includes Correlation ID, CORS and request logging middleware.
"""

import time
from typing import Callable

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its status and timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        except Exception:
            # Traceback is logged once, by the global exception handler
            logger.error(
                "Request failed",
                process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "Request completed",
            status_code=response.status_code,
            client_ip=request.client.host if request.client else "unknown",
            process_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response


def setup_middleware(app) -> None:
    """Setup all middleware for the application.

    Starlette runs middleware last-added-first, so CORS is added last to
    answer preflight requests before anything else runs.
    """
    settings = get_settings()

    app.add_middleware(RequestLoggingMiddleware)

    # Correlation ID wraps the logger so the id is bound before it logs
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
