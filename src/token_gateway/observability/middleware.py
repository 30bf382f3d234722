"""
token_gateway.observability.middleware

HTTP middleware for request-scoped logging context and request metrics.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Record per-route request counts and latencies.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from token_gateway.observability.metrics import REQUEST_COUNT, REQUEST_DURATION

_UNMATCHED_ROUTE = "unmatched"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    - Labels metrics by route template, never by raw path
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        # The router stores the matched route on the shared scope.
        route = getattr(request.scope.get("route"), "path", _UNMATCHED_ROUTE)
        REQUEST_COUNT.labels(
            method=request.method, route=route, status_code=str(response.status_code)
        ).inc()
        REQUEST_DURATION.labels(method=request.method, route=route).observe(
            time.perf_counter() - start
        )

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# This middleware complements `observability.logging.configure_logging` by ensuring
# request metadata is present on every log line without explicit parameter threading.
