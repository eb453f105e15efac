# relay/models/responses.py
"""Pydantic response models for the License Lookup Relay."""

from datetime import datetime
from datetime import timezone
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# =============================================================================
# Health & Status Responses
# =============================================================================


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    status: str = Field(default="healthy", description="Health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Current server time (UTC)",
    )


class VersionResponse(BaseModel):
    """Response for GET /version endpoint."""

    api_version: str = Field(description="API version")
    relay_version: str = Field(description="Installed package version")


# =============================================================================
# License Records
# =============================================================================


class ColoradoLicenseRecord(BaseModel):
    """One row of the Colorado professional licenses dataset.

    Only commonly used columns are declared; any other column returned by
    the registry is passed through. Values are relayed with the types the
    registry sent, and parseable date columns are MM/DD/YYYY strings.
    Columns the registry omits stay omitted in the response.
    """

    model_config = ConfigDict(extra="allow")

    lastname: Any = None
    firstname: Any = None
    middlename: Any = None
    entityname: Any = None
    city: Any = None
    state: Any = None
    licensetype: Any = None
    licensenumber: Any = None
    licensestatusdescription: Any = None
    licensefirstissuedate: Any = None
    licenselastreneweddate: Any = None
    licenseexpirationdate: Any = None
    casenumber: Any = None
    programaction: Any = None
    disciplineeffectivedate: Any = None


# =============================================================================
# Error Responses
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body returned by every failing handler."""

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional error context"
    )
    request_id: str | None = Field(default=None, description="Request ID for tracing")
