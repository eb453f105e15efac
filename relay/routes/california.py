# relay/routes/california.py
"""California license lookup endpoint."""

from typing import Any

import httpx
from fastapi import APIRouter
from fastapi import Depends

from lookup import california
from lookup.config import UpstreamConfig
from lookup.upstream import send
from relay.dependencies import get_config
from relay.dependencies import get_http_client
from relay.exceptions import ServiceUnavailableError
from relay.exceptions import ValidationError
from relay.exceptions import upstream_errors
from relay.models import CaliforniaSearchRequest

router = APIRouter(tags=["California"])


@router.post("/cali-api")
async def california_lookup(
    request: CaliforniaSearchRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
    config: UpstreamConfig = Depends(get_config),
) -> Any:
    """Search California DCA licenses by license numbers or by name.

    License numbers take precedence over name. Returns the upstream body
    unmodified.

    Raises:
        ValidationError: If neither licenseNumbers nor name is usable (400).
        ServiceUnavailableError: If CALI_API_AUTH is not configured (503).
        UpstreamError: If the registry returns a non-success status.
    """
    try:
        upstream_request = california.build_request(
            config,
            license_numbers=request.license_numbers,
            name=request.name,
        )
    except california.MissingCredentialsError as e:
        raise ServiceUnavailableError(
            "California lookups are not configured", details={"jurisdiction": "CA"}
        ) from e
    except ValueError as e:
        raise ValidationError(str(e)) from e

    with upstream_errors():
        return await send(client, upstream_request)
