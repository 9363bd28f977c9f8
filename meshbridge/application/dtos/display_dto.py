"""
Display DTOs - Application Layer

DTOs for reading and changing the display settings over the API.
"""

from pydantic import BaseModel, Field

from meshbridge.domain.entities.display import (
    DISPLAY_LOCATION,
    DeviceCommand,
    DisplaySettings,
)


class DisplaySettingsDTO(BaseModel):
    """DTO for the desired display state of a device."""

    device: str = Field(min_length=1, description="Target device identifier")
    enabled: bool = Field(description="Whether the display is switched on")

    model_config = {
        "json_schema_extra": {"example": {"device": "dev-1", "enabled": True}}
    }

    def to_domain(self) -> DisplaySettings:
        return DisplaySettings(device=self.device, enabled=self.enabled)

    @classmethod
    def from_domain(cls, settings: DisplaySettings) -> "DisplaySettingsDTO":
        return cls(device=settings.device, enabled=settings.enabled)


class DeviceCommandDTO(BaseModel):
    """DTO for a command as sent to a device."""

    device_id: str = Field(description="Target device identifier")
    on: bool = Field(description="Requested on/off state")
    location: int = Field(
        default=DISPLAY_LOCATION, description="Element slot addressed by the command"
    )
    raw: str = Field(description="Hex encoded binary message")

    @classmethod
    def from_domain(cls, command: DeviceCommand) -> "DeviceCommandDTO":
        return cls(
            device_id=command.device_id,
            on=command.payload.display.on,
            location=command.payload.display.location,
            raw=command.payload.to_raw_message().to_bytes().hex(),
        )
