"""Translation of display settings into device commands."""

from meshbridge.domain.entities.display import (
    DISPLAY_LOCATION,
    CommandPayload,
    DeviceCommand,
    DisplaySettings,
    OnOffSet,
)
from meshbridge.domain.entities.errors import CommandValidationError


def validate_display_settings(settings: DisplaySettings) -> None:
    """Reject settings that cannot be addressed to a device."""
    device = getattr(settings, "device", None)
    if not isinstance(device, str) or not device.strip():
        raise CommandValidationError(
            "Display settings require a device identifier",
            details={"device": device},
        )
    if not isinstance(getattr(settings, "enabled", None), bool):
        raise CommandValidationError(
            "Display settings require a boolean enabled flag",
            details={"device": device, "enabled": getattr(settings, "enabled", None)},
        )


def translate(settings: DisplaySettings) -> DeviceCommand:
    """Build the on/off command for the device's display element."""
    validate_display_settings(settings)
    display = OnOffSet(on=settings.enabled, location=DISPLAY_LOCATION)
    return DeviceCommand(device_id=settings.device, payload=CommandPayload(display))
