"""Event Use Cases - Application Layer"""

from meshbridge.application.dtos.event_dto import DeviceEventDTO, EventAcceptedDTO
from meshbridge.domain.entities.errors import EventValidationError
from meshbridge.domain.entities.events import DeviceEvent
from meshbridge.domain.ports.broadcast import IBroadcastPublisher
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class SubmitEventUseCase:
    """Hands an uplink event over to the event stream."""

    def __init__(self, event_stream: IBroadcastPublisher[DeviceEvent]) -> None:
        self._event_stream = event_stream

    def execute(self, request: DeviceEventDTO) -> EventAcceptedDTO:
        event = request.to_domain()
        if not event.device_id.strip():
            raise EventValidationError("Device event requires a device identifier")

        self._event_stream.send(event)
        logger.debug("events.submitted", device=event.device_id)
        return EventAcceptedDTO(accepted=True, device_id=event.device_id)
