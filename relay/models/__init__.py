# relay/models/__init__.py
"""Pydantic models for relay request/response schemas."""

from relay.models.requests import CaliforniaSearchRequest
from relay.models.responses import ColoradoLicenseRecord
from relay.models.responses import ErrorResponse
from relay.models.responses import HealthResponse
from relay.models.responses import VersionResponse

__all__ = [
    # Requests
    "CaliforniaSearchRequest",
    # Responses
    "ColoradoLicenseRecord",
    "ErrorResponse",
    "HealthResponse",
    "VersionResponse",
]
