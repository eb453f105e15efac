# lookup/california.py
"""California license lookup (Department of Consumer Affairs search service)."""

from typing import Any

import httpx

from lookup.config import UpstreamConfig
from lookup.upstream import UpstreamRequest
from lookup.upstream import send

JURISDICTION = "CA"

LICENSE_NUMBER_METHOD = "LIC_NBR"
NAME_METHOD = "NAME_INDX"


class MissingCredentialsError(Exception):
    """CALI_API_AUTH is not configured."""


def format_name(text: str) -> str:
    """Format a free-text name for the name-index search.

    Exactly two tokens are reordered to ``"Last, First"``. Anything else,
    including a single token or an already formatted ``"Last, First"``, is
    passed through unchanged.

    Examples:
        >>> format_name("jane doe")
        'doe, jane'
        >>> format_name("Doe, Jane")
        'Doe, Jane'
    """
    parts = text.split()
    if len(parts) == 2 and not parts[0].endswith(","):
        first, last = parts
        return f"{last}, {first}"
    return text


def authorization_header(credential: str) -> str:
    """Return the Basic Authorization header value for ``credential``."""
    if credential.lower().startswith("basic "):
        return credential
    return f"Basic {credential}"


def build_request(
    config: UpstreamConfig,
    *,
    license_numbers: list[str] | None = None,
    name: str | None = None,
) -> UpstreamRequest:
    """Build the search POST for license numbers or a name.

    License-number search wins whenever numbers are given; the name is used
    only when there are none. The body carries only the field for the chosen
    search method.

    Raises:
        ValueError: If neither a non-empty number list nor a name is given.
        MissingCredentialsError: If no Basic-auth credential is configured.
    """
    body: dict[str, Any] = {"clientCode": list(config.cali_client_codes)}

    if license_numbers is not None:
        numbers = [number.strip() for number in license_numbers if number.strip()]
        if not numbers:
            raise ValueError("licenseNumbers must contain at least one license number")
        body["searchMethod"] = LICENSE_NUMBER_METHOD
        body["licenseNumbers"] = numbers
    elif name and name.strip():
        body["searchMethod"] = NAME_METHOD
        body["name"] = format_name(name.strip())
    else:
        raise ValueError("Either licenseNumbers or name is required")

    if not config.cali_api_auth:
        raise MissingCredentialsError("CALI_API_AUTH is not configured")

    return UpstreamRequest(
        jurisdiction=JURISDICTION,
        method="POST",
        url=config.cali_api_url,
        headers={
            "Authorization": authorization_header(config.cali_api_auth),
            "Accept": "application/json",
        },
        body=body,
    )


async def search(
    client: httpx.AsyncClient,
    config: UpstreamConfig,
    *,
    license_numbers: list[str] | None = None,
    name: str | None = None,
) -> Any:
    """Search the California registry and return the upstream body unmodified."""
    request = build_request(config, license_numbers=license_numbers, name=name)
    return await send(client, request)
