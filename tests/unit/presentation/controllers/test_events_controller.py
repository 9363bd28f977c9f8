from __future__ import annotations

import pytest
from fastapi import HTTPException

from meshbridge.application.dtos.event_dto import DeviceEventDTO, EventAcceptedDTO
from meshbridge.application.use_cases.event_use_cases import SubmitEventUseCase
from meshbridge.presentation.controllers.events_controller import submit_event
from tests.conftest import RecordingPublisher


@pytest.mark.asyncio
async def test_submit_event_accepts() -> None:
    stream = RecordingPublisher("event-stream")

    response = await submit_event(
        DeviceEventDTO(device_id="dev-1", payload={"t": 20}),
        submit_event_use_case=SubmitEventUseCase(event_stream=stream),
    )

    assert response == EventAcceptedDTO(accepted=True, device_id="dev-1")
    assert len(stream.messages) == 1


@pytest.mark.asyncio
async def test_submit_event_rejects_blank_device() -> None:
    with pytest.raises(HTTPException) as exc:
        await submit_event(
            DeviceEventDTO(device_id=" "),
            submit_event_use_case=SubmitEventUseCase(event_stream=RecordingPublisher()),
        )

    assert exc.value.status_code == 422
