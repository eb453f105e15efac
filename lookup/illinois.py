# lookup/illinois.py
"""Illinois professional license lookup (data.illinois.gov CKAN datastore)."""

from typing import Any

import httpx

from lookup.config import UpstreamConfig
from lookup.upstream import UpstreamRequest
from lookup.upstream import send

JURISDICTION = "IL"


def build_request(query: str, config: UpstreamConfig) -> UpstreamRequest:
    """Build the datastore_search request for a free-text query.

    Raises:
        ValueError: If the query is empty or whitespace-only.
    """
    query = query.strip()
    if not query:
        raise ValueError("Search query cannot be empty")

    return UpstreamRequest(
        jurisdiction=JURISDICTION,
        method="GET",
        url=config.il_api_url,
        params={"resource_id": config.il_resource_id, "q": query},
    )


async def search(client: httpx.AsyncClient, query: str, config: UpstreamConfig) -> Any:
    """Search the Illinois dataset and return the upstream body unmodified."""
    return await send(client, build_request(query, config))
