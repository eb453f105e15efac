# relay/middleware/__init__.py
"""Relay middleware: request ID tracing and request/response logging."""

from relay.middleware.logging import RequestLoggingMiddleware
from relay.middleware.request_id import RequestIDMiddleware
from relay.middleware.request_id import get_request_id

__all__ = ["get_request_id", "RequestIDMiddleware", "RequestLoggingMiddleware"]
