from __future__ import annotations

import dataclasses

import pytest

from meshbridge.domain.entities.display import (
    DISPLAY_LOCATION,
    CommandPayload,
    DeviceCommand,
    DisplaySettings,
    OnOffSet,
    RawMessage,
)


def test_on_off_set_defaults_to_display_location() -> None:
    display = OnOffSet(on=True)

    assert display.location == DISPLAY_LOCATION == 0x100
    assert display.to_dict() == {"on": True, "location": 0x100}


def test_command_payload_json_shape() -> None:
    payload = CommandPayload(OnOffSet(on=False))

    assert payload.to_dict() == {"display": {"on": False, "location": 256}}


@pytest.mark.parametrize(
    ("on", "expected_hex"),
    [(True, "01000282020100"), (False, "01000282020000")],
)
def test_raw_message_encodes_generic_onoff_set(on: bool, expected_hex: str) -> None:
    raw = CommandPayload(OnOffSet(on=on)).to_raw_message()

    assert raw.location == 0x100
    assert raw.opcode == b"\x82\x02"
    assert raw.to_bytes().hex() == expected_hex


def test_raw_message_with_custom_location() -> None:
    raw = RawMessage(location=0x0002, opcode=b"\x82\x03", parameters=b"\x01")

    assert raw.to_bytes() == b"\x00\x02\x02\x82\x03\x01"


def test_device_command_exposes_enabled_flag() -> None:
    command = DeviceCommand(device_id="dev-1", payload=CommandPayload(OnOffSet(on=True)))

    assert command.enabled is True


def test_display_settings_are_immutable() -> None:
    settings = DisplaySettings(device="dev-1", enabled=True)

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.enabled = False  # type: ignore[misc]
