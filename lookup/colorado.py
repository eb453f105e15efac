# lookup/colorado.py
"""Colorado professional license lookup (data.colorado.gov Socrata dataset).

Socrata matches column values exactly, and the dataset stores names with a
leading capital, so names are capitalized before they are sent.
"""

from enum import Enum
from typing import Any

import httpx

from lookup.config import UpstreamConfig
from lookup.dates import to_us_date
from lookup.logging import get_logger
from lookup.upstream import UpstreamConnectionError
from lookup.upstream import UpstreamRequest
from lookup.upstream import send

log = get_logger(__name__)

JURISDICTION = "CO"

# Date columns reformatted to MM/DD/YYYY in every returned record
DATE_FIELDS = (
    "licensefirstissuedate",
    "licenselastreneweddate",
    "licenseexpirationdate",
    "disciplineeffectivedate",
)


class SearchType(str, Enum):
    """Colorado search modes."""

    NAME = "name"
    LICENSE = "license"


def capitalize_name(part: str) -> str:
    """Upper-case the first letter and lower-case the rest."""
    return part.capitalize()


def split_name(text: str) -> tuple[str | None, str]:
    """Split free text into (first name, last name).

    The first whitespace-separated token is the first name and the remaining
    text is the last name. Text without internal whitespace is a last name
    only. Both parts are capitalized.

    Examples:
        >>> split_name("john smith")
        ('John', 'Smith')
        >>> split_name("SMITH")
        (None, 'Smith')
    """
    parts = text.strip().split(maxsplit=1)
    if len(parts) == 2:
        return capitalize_name(parts[0]), capitalize_name(parts[1])
    return None, capitalize_name(text.strip())


def resolve_search(
    search_type: SearchType | None,
    name: str | None,
    license_number: str | None,
) -> tuple[SearchType, str]:
    """Decide the active search mode and its value.

    Args:
        search_type: Explicit mode, or None to infer it from the values given.
        name: Free-text name.
        license_number: License number.

    Returns:
        (mode, value) for exactly one active search mode.

    Raises:
        ValueError: If the active mode has no value, or the mode is ambiguous.
    """
    name = name.strip() if name else None
    license_number = license_number.strip() if license_number else None

    if search_type is None:
        if name and license_number:
            raise ValueError(
                "Provide either name or licensenumber, or set searchType"
            )
        if license_number:
            return SearchType.LICENSE, license_number
        if name:
            return SearchType.NAME, name
        raise ValueError("One of name or licensenumber is required")

    if search_type is SearchType.LICENSE:
        if not license_number:
            raise ValueError("licensenumber is required when searchType is 'license'")
        return SearchType.LICENSE, license_number

    if not name:
        raise ValueError("name is required when searchType is 'name'")
    return SearchType.NAME, name


def build_request(
    search_type: SearchType, value: str, config: UpstreamConfig
) -> UpstreamRequest:
    """Build the Socrata query for a resolved search."""
    params: dict[str, str]
    if search_type is SearchType.LICENSE:
        params = {"licensenumber": value}
    else:
        first_name, last_name = split_name(value)
        params = {"lastname": last_name}
        if first_name is not None:
            params["firstname"] = first_name

    headers = {}
    if config.co_app_token:
        headers["X-App-Token"] = config.co_app_token

    return UpstreamRequest(
        jurisdiction=JURISDICTION,
        method="GET",
        url=config.co_api_url,
        params=params,
        headers=headers,
    )


def normalize_record(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` with its date columns as MM/DD/YYYY.

    Absent and null date columns are left as they are. A value that is not
    a recognizable date is kept unchanged.
    """
    normalized = dict(record)
    for field_name in DATE_FIELDS:
        value = normalized.get(field_name)
        if not isinstance(value, str):
            continue
        formatted = to_us_date(value)
        if formatted is None:
            log.warning(
                "date_unparseable",
                jurisdiction=JURISDICTION,
                field=field_name,
                value=value,
            )
            continue
        normalized[field_name] = formatted
    return normalized


async def search(
    client: httpx.AsyncClient,
    search_type: SearchType,
    value: str,
    config: UpstreamConfig,
) -> list[dict[str, Any]]:
    """Search the Colorado dataset and normalize the returned records.

    Raises:
        UpstreamConnectionError: If the upstream body is not a JSON array of
            objects.
    """
    body = await send(client, build_request(search_type, value, config))
    if not isinstance(body, list) or not all(isinstance(r, dict) for r in body):
        raise UpstreamConnectionError(JURISDICTION, "expected a JSON array of records")

    return [normalize_record(record) for record in body]
