# relay/routes/illinois.py
"""Illinois license lookup endpoint."""

from typing import Any

import httpx
from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query

from lookup import illinois
from lookup.config import UpstreamConfig
from relay.dependencies import get_config
from relay.dependencies import get_http_client
from relay.exceptions import ValidationError
from relay.exceptions import upstream_errors

router = APIRouter(tags=["Illinois"])


@router.get("/ill-api")
async def illinois_lookup(
    q: str = Query(
        ...,
        min_length=1,
        max_length=200,
        description="Free-text search (name or license number)",
    ),
    client: httpx.AsyncClient = Depends(get_http_client),
    config: UpstreamConfig = Depends(get_config),
) -> Any:
    """Search the Illinois professional license dataset.

    Returns the upstream datastore_search body unmodified.

    Raises:
        ValidationError: If q is blank (400).
        UpstreamError: If the registry returns a non-success status.
    """
    if not q.strip():
        raise ValidationError(
            "Search query cannot be empty or whitespace-only",
            details={"errors": [{"field": "query.q", "reason": "blank value"}]},
        )

    with upstream_errors():
        return await illinois.search(client, q, config)
