# relay/exceptions.py
"""Custom exception classes for the License Lookup Relay.

All custom exceptions inherit from APIError and include:
- HTTP status code
- Error code (for client identification)
- Human-readable message
- Optional details dictionary for additional context
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from lookup.upstream import UpstreamConnectionError
from lookup.upstream import UpstreamStatusError


class APIError(Exception):
    """Base exception for all API errors.

    Attributes:
        status_code: HTTP status code to return.
        code: Machine-readable error code (e.g., 'VALIDATION_ERROR').
        message: Human-readable error message.
        details: Optional dictionary with additional error context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


class ValidationError(APIError):
    """Raised when request validation fails (400 Bad Request).

    Raised before any upstream call is made.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            status_code=400,
            code="VALIDATION_ERROR",
            details=details,
        )


class UpstreamError(APIError):
    """Raised when an upstream registry returns a non-success status.

    Upstream 4xx/5xx statuses are propagated as the response status; any
    other non-success status (e.g. an unfollowed redirect) becomes 502.
    """

    def __init__(self, jurisdiction: str, status_code: int) -> None:
        """Initialize upstream error.

        Args:
            jurisdiction: Registry that failed ('IL', 'CO' or 'CA').
            status_code: HTTP status returned by the registry.
        """
        super().__init__(
            message=f"{jurisdiction} licensing API returned HTTP {status_code}",
            status_code=status_code if status_code >= 400 else 502,
            code="UPSTREAM_ERROR",
            details={"jurisdiction": jurisdiction, "upstream_status": status_code},
        )


class UpstreamUnavailableError(APIError):
    """Raised when an upstream registry cannot be reached (502 / 504).

    Use for network failures, timeouts and unusable response bodies.
    """

    def __init__(self, jurisdiction: str, message: str, *, timeout: bool = False) -> None:
        super().__init__(
            message=message,
            status_code=504 if timeout else 502,
            code="UPSTREAM_TIMEOUT" if timeout else "UPSTREAM_UNAVAILABLE",
            details={"jurisdiction": jurisdiction},
        )


class ServiceUnavailableError(APIError):
    """Raised when required configuration is missing (503 Service Unavailable)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            message=message,
            status_code=503,
            code="SERVICE_UNAVAILABLE",
            details=details,
        )


@contextmanager
def upstream_errors() -> Iterator[None]:
    """Translate lookup-layer failures into API errors.

    Wrap the upstream call of a route handler:

        with upstream_errors():
            body = await illinois.search(client, q, config)
    """
    try:
        yield
    except UpstreamStatusError as e:
        raise UpstreamError(e.jurisdiction, e.status_code) from e
    except UpstreamConnectionError as e:
        raise UpstreamUnavailableError(e.jurisdiction, str(e), timeout=e.timeout) from e
