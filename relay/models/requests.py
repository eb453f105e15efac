# relay/models/requests.py
"""Pydantic request models for the License Lookup Relay."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


class CaliforniaSearchRequest(BaseModel):
    """Request body for POST /cali-api."""

    model_config = ConfigDict(populate_by_name=True)

    license_numbers: list[str] | None = Field(
        default=None,
        alias="licenseNumbers",
        description="License numbers to look up. Takes precedence over name.",
        examples=[["A123456"]],
    )
    name: str | None = Field(
        default=None,
        max_length=200,
        description="Licensee name, 'First Last' or 'Last, First'",
        examples=["Jane Doe"],
    )

    @field_validator("license_numbers")
    @classmethod
    def license_numbers_not_empty(cls, v: list[str] | None) -> list[str] | None:
        """Reject an empty list or a list of blank numbers."""
        if v is None:
            return v
        numbers = [number.strip() for number in v if number.strip()]
        if not numbers:
            raise ValueError("licenseNumbers must contain at least one license number")
        return numbers

    @model_validator(mode="after")
    def require_search_value(self) -> "CaliforniaSearchRequest":
        """Require license numbers or a non-blank name."""
        if self.license_numbers is None and not (self.name and self.name.strip()):
            raise ValueError("Either licenseNumbers or name is required")
        return self
