"""
Event DTOs - Application Layer

Inbound uplink events as delivered by the transport integration.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

from meshbridge.domain.entities.events import DeviceEvent


class DeviceEventDTO(BaseModel):
    """DTO for an uplink event."""

    device_id: str = Field(min_length=1, description="Sending device")
    application: Optional[str] = Field(
        default=None, description="Application the device belongs to"
    )
    payload: Any = Field(default=None, description="Decoded uplink payload")
    received_at: Optional[datetime] = Field(
        default=None, description="Time the transport received the uplink"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "device_id": "dev-1",
                "application": "hackathon",
                "payload": {"temperature": 21.5},
            }
        }
    }

    def to_domain(self) -> DeviceEvent:
        return DeviceEvent(
            device_id=self.device_id,
            payload=self.payload,
            application=self.application,
            received_at=self.received_at or datetime.now(timezone.utc),
        )


class EventAcceptedDTO(BaseModel):
    """DTO acknowledging an event handed to the event stream."""

    accepted: bool = Field(default=True)
    device_id: str = Field(description="Sending device")
