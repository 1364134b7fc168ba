"""Request logging middleware."""

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Polled by monitors; logged at DEBUG to keep the INFO stream readable.
QUIET_PATHS = frozenset({"/api/v1/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its browsing session, status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        session_id = request.headers.get("x-session-id", "default")
        start = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - start) * 1000

        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        logger.log(
            level,
            "[%s] %s %s → %d (%.1fms)",
            session_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
