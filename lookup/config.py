# lookup/config.py
"""Upstream configuration for the License Lookup Relay.

All settings are read from the environment once and held in a frozen
dataclass. Use get_upstream_config() to obtain the shared instance.
"""

import os
from dataclasses import dataclass
from dataclasses import field
from functools import lru_cache

# Illinois: CKAN datastore on data.illinois.gov (professional licenses dataset)
DEFAULT_IL_API_URL = "https://data.illinois.gov/api/3/action/datastore_search"
DEFAULT_IL_RESOURCE_ID = "fecd51fd-830f-4245-b4e0-9d952992f855"

# Colorado: Socrata "Professional and Occupational Licenses in Colorado"
DEFAULT_CO_API_URL = "https://data.colorado.gov/resource/7s5z-vewr.json"

# California: Department of Consumer Affairs license search service
DEFAULT_CALI_API_URL = (
    "https://iservices.dca.ca.gov/api/search/v1/licenseSearchService/getLicenseSearch"
)
DEFAULT_CALI_CLIENT_CODES = "800"

# Seconds before an outbound call is abandoned
DEFAULT_UPSTREAM_TIMEOUT = 30.0


def _split_csv(value: str) -> tuple[str, ...]:
    """Split a comma-separated env value, dropping blanks."""
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class UpstreamConfig:
    """Read-only settings for the three upstream registries."""

    il_api_url: str = DEFAULT_IL_API_URL
    il_resource_id: str = DEFAULT_IL_RESOURCE_ID
    co_api_url: str = DEFAULT_CO_API_URL
    co_app_token: str | None = None
    cali_api_url: str = DEFAULT_CALI_API_URL
    cali_api_auth: str | None = None
    cali_client_codes: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(DEFAULT_CALI_CLIENT_CODES)
    )
    timeout: float = DEFAULT_UPSTREAM_TIMEOUT

    @classmethod
    def from_env(cls) -> "UpstreamConfig":
        """Build configuration from environment variables.

        Returns:
            UpstreamConfig populated from the process environment.

        Raises:
            ValueError: If UPSTREAM_TIMEOUT is not a positive number.
        """
        timeout = float(os.getenv("UPSTREAM_TIMEOUT", str(DEFAULT_UPSTREAM_TIMEOUT)))
        if timeout <= 0:
            raise ValueError(f"UPSTREAM_TIMEOUT must be positive, got {timeout}")

        return cls(
            il_api_url=os.getenv("IL_API_URL", DEFAULT_IL_API_URL),
            il_resource_id=os.getenv("IL_RESOURCE_ID", DEFAULT_IL_RESOURCE_ID),
            co_api_url=os.getenv("CO_API_URL", DEFAULT_CO_API_URL),
            co_app_token=os.getenv("CO_APP_TOKEN") or None,
            cali_api_url=os.getenv("CALI_API_URL", DEFAULT_CALI_API_URL),
            cali_api_auth=os.getenv("CALI_API_AUTH") or None,
            cali_client_codes=_split_csv(
                os.getenv("CALI_CLIENT_CODES", DEFAULT_CALI_CLIENT_CODES)
            ),
            timeout=timeout,
        )


@lru_cache(maxsize=1)
def get_upstream_config() -> UpstreamConfig:
    """Return the process-wide upstream configuration (loaded once)."""
    return UpstreamConfig.from_env()
