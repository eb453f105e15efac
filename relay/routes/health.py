# relay/routes/health.py
"""Health and version endpoints for the License Lookup Relay."""

from datetime import datetime
from datetime import timezone

from fastapi import APIRouter

from relay.config import API_VERSION
from relay.models import HealthResponse
from relay.models import VersionResponse

router = APIRouter(tags=["Health"])


def _get_relay_version() -> str:
    """Get the installed package version, or 'unknown' when not installed."""
    try:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version

        return version("license-lookup-relay")
    except PackageNotFoundError:
        return "unknown"


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness check. Does not contact any upstream registry."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/version", response_model=VersionResponse)
async def version() -> VersionResponse:
    """Get API and package version information."""
    return VersionResponse(
        api_version=API_VERSION,
        relay_version=_get_relay_version(),
    )
