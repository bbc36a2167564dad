"""
Request logging middleware for FastAPI application.

Handles request/response logging and the correlation ID.
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from bakery.core.shared.logger import correlation_id_var

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request and tags all log
    lines emitted while handling it with a correlation ID.
    """

    EXCLUDE_PATHS: tuple[str, ...] = (
        "/health",
        "/favicon.ico",
    )

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    def _should_log(self, path: str) -> bool:
        return not any(path.startswith(exclude) for exclude in self.EXCLUDE_PATHS)

    def _generate_correlation_id(self) -> str:
        return str(uuid.uuid4())[:8]

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or self._generate_correlation_id()
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)

        try:
            if not self._should_log(request.url.path):
                response = await call_next(request)
                response.headers[CORRELATION_HEADER] = correlation_id
                return response

            start_time = time.perf_counter()
            logger.info(f"--> {request.method} {request.url.path} from {self._get_client_ip(request)}")

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(f"<-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}")
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                log_level,
                f"<-- {request.method} {request.url.path} {response.status_code} in {duration_ms:.2f}ms",
            )

            response.headers[CORRELATION_HEADER] = correlation_id
            response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            correlation_id_var.reset(token)

    def _get_client_ip(self, request: Request) -> str:
        """Client IP, honouring X-Forwarded-For from a proxy."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"
