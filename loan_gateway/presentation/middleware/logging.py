"""Request/response logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from loan_gateway.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """Route template of the matched endpoint, so metric labels stay bounded."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ENDPOINT


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request completion and duration, and records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        log = logger.bind(method=method, path=path)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, endpoint_label(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, endpoint_label(request), response.status_code, duration)

        return response
