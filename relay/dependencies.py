# relay/dependencies.py
"""FastAPI dependencies for the License Lookup Relay.

Tests replace these through app.dependency_overrides.
"""

import httpx
from fastapi import Request

from lookup.config import UpstreamConfig
from lookup.config import get_upstream_config


def get_config() -> UpstreamConfig:
    """Return the process-wide upstream configuration."""
    return get_upstream_config()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared outbound client created in the app lifespan."""
    client: httpx.AsyncClient = request.app.state.http_client
    return client
