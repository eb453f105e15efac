# lookup/upstream.py
"""Outbound request model and transport for the upstream registries.

Each jurisdiction module builds an UpstreamRequest from a validated query;
send() performs the call over a shared httpx.AsyncClient and returns the
decoded JSON body. Non-success statuses and transport failures are raised
as UpstreamStatusError / UpstreamConnectionError so the HTTP layer can map
them to error responses.
"""

import time
from dataclasses import dataclass
from dataclasses import field
from typing import Any

import httpx

from lookup.logging import get_logger

log = get_logger(__name__)


class UpstreamStatusError(Exception):
    """Upstream registry answered with a non-success HTTP status."""

    def __init__(self, jurisdiction: str, status_code: int, body: str = "") -> None:
        super().__init__(
            f"{jurisdiction} upstream returned HTTP {status_code}"
        )
        self.jurisdiction = jurisdiction
        self.status_code = status_code
        self.body = body


class UpstreamConnectionError(Exception):
    """Upstream registry could not be reached or returned an unusable body."""

    def __init__(self, jurisdiction: str, message: str, *, timeout: bool = False) -> None:
        super().__init__(f"{jurisdiction} upstream unavailable: {message}")
        self.jurisdiction = jurisdiction
        self.timeout = timeout


@dataclass(frozen=True)
class UpstreamRequest:
    """A fully-shaped request for one upstream registry."""

    jurisdiction: str
    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] | None = None


async def send(client: httpx.AsyncClient, request: UpstreamRequest) -> Any:
    """Execute an upstream request and decode its JSON body.

    Args:
        client: Shared async HTTP client.
        request: Request built by one of the jurisdiction modules.

    Returns:
        Decoded JSON body exactly as the upstream returned it.

    Raises:
        UpstreamStatusError: If the upstream status is not 2xx.
        UpstreamConnectionError: On timeout, network failure or a body that
            is not valid JSON.
    """
    log.debug(
        "upstream_request",
        jurisdiction=request.jurisdiction,
        method=request.method,
        url=request.url,
        params=request.params,
    )
    start_time = time.time()

    try:
        response = await client.request(
            request.method,
            request.url,
            params=request.params or None,
            headers=request.headers,
            json=request.body,
        )
    except httpx.TimeoutException as e:
        log.warning(
            "upstream_error",
            jurisdiction=request.jurisdiction,
            url=request.url,
            error_type=type(e).__name__,
        )
        raise UpstreamConnectionError(
            request.jurisdiction, "request timed out", timeout=True
        ) from e
    except httpx.RequestError as e:
        log.warning(
            "upstream_error",
            jurisdiction=request.jurisdiction,
            url=request.url,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise UpstreamConnectionError(request.jurisdiction, str(e)) from e

    latency_ms = int((time.time() - start_time) * 1000)
    log.info(
        "upstream_response",
        jurisdiction=request.jurisdiction,
        status_code=response.status_code,
        latency_ms=latency_ms,
    )

    if not response.is_success:
        raise UpstreamStatusError(
            request.jurisdiction, response.status_code, response.text[:500]
        )

    try:
        return response.json()
    except ValueError as e:
        raise UpstreamConnectionError(
            request.jurisdiction, "response body is not valid JSON"
        ) from e
