from __future__ import annotations

import pytest

from meshbridge.application.dtos.display_dto import DisplaySettingsDTO
from meshbridge.application.use_cases.display_use_cases import (
    GetDisplaySettingsUseCase,
    UpdateDisplaySettingsUseCase,
)
from meshbridge.domain.entities.display import DisplaySettings
from meshbridge.domain.entities.errors import CommandValidationError
from meshbridge.infrastructure.state import DisplayStateStore


@pytest.mark.asyncio
async def test_update_stores_publishes_and_returns_command(recording_publisher) -> None:
    store = DisplayStateStore(recording_publisher)
    use_case = UpdateDisplaySettingsUseCase(display_state_store=store)

    command = await use_case.execute(DisplaySettingsDTO(device="dev-1", enabled=True))

    assert command.device_id == "dev-1"
    assert command.on is True
    assert command.location == 0x100
    assert command.raw == "01000282020100"
    assert recording_publisher.messages == [DisplaySettings(device="dev-1", enabled=True)]


@pytest.mark.asyncio
async def test_update_rejects_blank_device_before_publishing(
    recording_publisher,
) -> None:
    store = DisplayStateStore(recording_publisher)
    use_case = UpdateDisplaySettingsUseCase(display_state_store=store)

    with pytest.raises(CommandValidationError):
        await use_case.execute(DisplaySettingsDTO(device="   ", enabled=True))

    assert recording_publisher.messages == []
    assert await store.current() is None


@pytest.mark.asyncio
async def test_get_returns_none_then_latest(recording_publisher) -> None:
    store = DisplayStateStore(recording_publisher)
    use_case = GetDisplaySettingsUseCase(display_state_store=store)

    assert await use_case.execute() is None

    await store.update(DisplaySettings(device="dev-1", enabled=False))
    current = await use_case.execute()

    assert current == DisplaySettingsDTO(device="dev-1", enabled=False)
