"""Claim DTOs - Application Layer"""

from typing import Optional

from pydantic import BaseModel, Field

from meshbridge.domain.entities.claim import ClaimStatus


class ClaimRequestDTO(BaseModel):
    """DTO for a claim request."""

    token: str = Field(min_length=1, description="Claim token printed on the device")

    model_config = {"json_schema_extra": {"example": {"token": "abc123"}}}


class ClaimStatusDTO(BaseModel):
    """DTO for the outcome of a claim."""

    claimed: bool = Field(description="Whether the device has been claimed")
    address: Optional[str] = Field(
        default=None, description="Network address assigned to the device"
    )

    model_config = {
        "json_schema_extra": {"example": {"claimed": True, "address": "00c0"}}
    }

    @classmethod
    def from_domain(cls, status: ClaimStatus) -> "ClaimStatusDTO":
        return cls(claimed=status.claimed, address=status.address)
