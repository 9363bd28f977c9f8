"""Health DTOs - Application Layer"""

from typing import Dict

from pydantic import BaseModel, Field


class ChannelStatusDTO(BaseModel):
    """DTO describing one broadcast channel."""

    subscribers: int = Field(description="Number of active subscribers")
    closed: bool = Field(description="Whether the channel has been closed")


class SystemHealthDTO(BaseModel):
    """DTO for the liveness endpoint."""

    status: str = Field(description="Overall status: up or degraded")
    application: str = Field(description="Registry application scope")
    channels: Dict[str, ChannelStatusDTO] = Field(default_factory=dict)
