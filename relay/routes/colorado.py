# relay/routes/colorado.py
"""Colorado license lookup endpoint."""

import httpx
from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query

from lookup import colorado
from lookup.colorado import SearchType
from lookup.config import UpstreamConfig
from relay.dependencies import get_config
from relay.dependencies import get_http_client
from relay.exceptions import ValidationError
from relay.exceptions import upstream_errors
from relay.models import ColoradoLicenseRecord

router = APIRouter(tags=["Colorado"])


@router.get(
    "/colorado-api",
    response_model=list[ColoradoLicenseRecord],
    response_model_exclude_unset=True,
)
@router.get(
    "/colo-api",
    response_model=list[ColoradoLicenseRecord],
    response_model_exclude_unset=True,
    include_in_schema=False,
)
async def colorado_lookup(
    search_type: SearchType | None = Query(
        default=None,
        alias="searchType",
        description="'name' or 'license'; inferred when omitted",
    ),
    name: str | None = Query(
        default=None,
        max_length=200,
        description="'First Last' or a last name",
    ),
    license_number: str | None = Query(
        default=None,
        alias="licensenumber",
        max_length=100,
        description="License number, matched exactly",
    ),
    client: httpx.AsyncClient = Depends(get_http_client),
    config: UpstreamConfig = Depends(get_config),
) -> list[dict]:
    """Search Colorado professional licenses by name or license number.

    Date columns in every returned record are reformatted to MM/DD/YYYY.

    Raises:
        ValidationError: If no search value, or an ambiguous one, is given (400).
        UpstreamError: If the registry returns a non-success status.
    """
    try:
        mode, value = colorado.resolve_search(search_type, name, license_number)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    with upstream_errors():
        return await colorado.search(client, mode, value, config)
