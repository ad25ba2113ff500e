"""Pure ASGI middleware for correlation ID propagation via structlog contextvars.

Binds correlation_id, endpoint and method for every HTTP request and logs
request completion with duration and status.
"""

from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

CORRELATION_HEADER = b"x-correlation-id"


class CorrelationMiddleware:
    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        await self._handle_request(scope, receive, send)

    async def _handle_request(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        clear_contextvars()
        correlation_id = _extract_header(scope, CORRELATION_HEADER) or str(uuid4())
        bind_contextvars(
            correlation_id=correlation_id,
            context_endpoint=str(scope.get("path", "/")),
            context_method=str(scope.get("method", "UNKNOWN")),
        )
        http_status = 500
        start = time.perf_counter()

        async def _send_with_correlation(message: dict[str, Any]) -> None:
            nonlocal http_status
            if message.get("type") == "http.response.start":
                http_status = message.get("status", 500)
                headers = list(message.get("headers", []))
                headers.append((CORRELATION_HEADER, correlation_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, _send_with_correlation)
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "Request processed",
                processing_status="SUCCESS" if http_status < 400 else "ERROR",
                processing_duration_ms=duration_ms,
                processing_http_status=http_status,
            )


def _extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Case-insensitive header lookup in an ASGI scope."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None
