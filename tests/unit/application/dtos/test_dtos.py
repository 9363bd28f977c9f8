from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from meshbridge.application.dtos import (
    ClaimRequestDTO,
    ClaimStatusDTO,
    DeviceCommandDTO,
    DeviceEventDTO,
    DisplaySettingsDTO,
)
from meshbridge.domain.entities.claim import ClaimStatus
from meshbridge.domain.entities.display import (
    CommandPayload,
    DeviceCommand,
    DisplaySettings,
    OnOffSet,
)


def test_display_settings_dto_round_trip() -> None:
    settings = DisplaySettings(device="dev-1", enabled=True)

    assert DisplaySettingsDTO.from_domain(settings).to_domain() == settings


def test_display_settings_dto_requires_device() -> None:
    with pytest.raises(ValidationError):
        DisplaySettingsDTO(device="", enabled=True)


def test_device_command_dto_from_domain() -> None:
    command = DeviceCommand(device_id="dev-1", payload=CommandPayload(OnOffSet(on=False)))

    dto = DeviceCommandDTO.from_domain(command)

    assert dto.model_dump() == {
        "device_id": "dev-1",
        "on": False,
        "location": 256,
        "raw": "01000282020000",
    }


def test_claim_dtos() -> None:
    with pytest.raises(ValidationError):
        ClaimRequestDTO(token="")

    dto = ClaimStatusDTO.from_domain(ClaimStatus(claimed=True, address="00c0"))
    assert dto.model_dump() == {"claimed": True, "address": "00c0"}


def test_device_event_dto_to_domain_keeps_timestamp() -> None:
    received = datetime(2024, 1, 1, tzinfo=timezone.utc)

    event = DeviceEventDTO(
        device_id="dev-1", payload=[1, 2], received_at=received
    ).to_domain()

    assert event.device_id == "dev-1"
    assert event.payload == [1, 2]
    assert event.received_at == received


def test_device_event_dto_defaults_timestamp() -> None:
    event = DeviceEventDTO(device_id="dev-1").to_domain()

    assert event.received_at.tzinfo is not None
    assert event.payload is None
