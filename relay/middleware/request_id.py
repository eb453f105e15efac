# relay/middleware/request_id.py
"""Request ID middleware for request tracing.

Every request gets an ID, either the inbound X-Request-ID header or a new
UUID4. The ID is echoed in the X-Request-ID response header and kept in a
context variable so exception handlers and upstream logging can read it.
"""

import uuid
from collections.abc import Awaitable
from collections.abc import Callable
from contextvars import ContextVar

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return request_id_ctx.get()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assign a request ID and expose it on the response.

    The ID is stored in request.state.request_id, in request_id_ctx, and in
    structlog's context variables so that upstream_* log events carry it.
    Exceptions are not caught here; they propagate to the app's handlers.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_ctx.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)

            if REQUEST_ID_HEADER not in response.headers:
                response.headers[REQUEST_ID_HEADER] = request_id

            return response
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_ctx.reset(token)
