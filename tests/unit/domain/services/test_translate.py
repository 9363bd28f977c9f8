from __future__ import annotations

import pytest

from meshbridge.domain.entities.display import DISPLAY_LOCATION, DisplaySettings
from meshbridge.domain.entities.errors import CommandValidationError
from meshbridge.domain.services.command_translator import (
    translate,
    validate_display_settings,
)


@pytest.mark.parametrize("enabled", [True, False])
def test_translate_addresses_same_device_with_same_flag(enabled: bool) -> None:
    settings = DisplaySettings(device="dev-7", enabled=enabled)

    command = translate(settings)

    assert command.device_id == settings.device
    assert command.payload.display.on is enabled
    assert command.payload.display.location == DISPLAY_LOCATION


def test_translate_is_deterministic() -> None:
    settings = DisplaySettings(device="dev-1", enabled=True)

    assert translate(settings) == translate(settings)


@pytest.mark.parametrize("device", ["", "   ", None])
def test_translate_rejects_missing_device(device) -> None:
    with pytest.raises(CommandValidationError):
        translate(DisplaySettings(device=device, enabled=True))  # type: ignore[arg-type]


def test_validate_rejects_non_boolean_flag() -> None:
    with pytest.raises(CommandValidationError) as exc:
        validate_display_settings(DisplaySettings(device="dev-1", enabled="yes"))  # type: ignore[arg-type]

    assert exc.value.details["device"] == "dev-1"
