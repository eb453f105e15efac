# relay/middleware/logging.py
"""Request logging middleware.

Logs each inbound request and its outcome with latency. Register it before
RequestIDMiddleware (middleware runs in reverse registration order) so the
request ID is already assigned when this runs.
"""

import time
from collections.abc import Awaitable
from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from lookup.logging import get_logger
from relay.config import TRUST_PROXY_HEADERS

log = get_logger(__name__)


def _get_client_ip(request: Request) -> str:
    """Extract the client IP, honouring X-Forwarded-For only when trusted."""
    if TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            # "client, proxy1, proxy2"
            return forwarded_for.split(",")[0].strip()

    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request_started / request_completed / request_failed events."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.time()
        request_id = getattr(request.state, "request_id", None)
        client_ip = _get_client_ip(request)

        log.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            query=str(request.url.query) or None,
            client_ip=client_ip,
            request_id=request_id,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            latency_ms = int((time.time() - start_time) * 1000)
            log.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                client_ip=client_ip,
                latency_ms=latency_ms,
                request_id=request_id,
                error_type=type(e).__name__,
                error_message=str(e),
                exc_info=True,
            )
            # Let the app's exception handlers produce the response
            raise

        latency_ms = int((time.time() - start_time) * 1000)
        log.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            latency_ms=latency_ms,
            request_id=request_id,
        )
        return response
