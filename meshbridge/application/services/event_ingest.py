"""
Event Ingest - Application Layer

Entry point for uplink device events. The current policy is observe-only;
a downlink decider can answer an uplink with a command, which has to happen
within the device's receive window, so nothing here may wait on I/O.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional

from meshbridge.domain.entities.display import DeviceCommand
from meshbridge.domain.entities.errors import EventValidationError
from meshbridge.domain.entities.events import DeviceEvent
from meshbridge.domain.ports.broadcast import IBroadcastChannel, IBroadcastPublisher
from meshbridge.domain.ports.downlink import IDownlinkDecider, NoDownlink
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class EventIngest:
    """Receives uplink events from the event stream."""

    def __init__(
        self,
        event_stream: IBroadcastChannel[DeviceEvent],
        command_channel: IBroadcastPublisher[DeviceCommand],
        decider: Optional[IDownlinkDecider] = None,
    ) -> None:
        self._event_stream = event_stream
        self._command_channel = command_channel
        self._decider = decider or NoDownlink()
        self._subscription: Optional[Any] = None
        self._received: Counter[str] = Counter()

    def ingest(self, event: DeviceEvent) -> Optional[DeviceCommand]:
        """
        Process one uplink event.

        Returns:
            The downlink command sent in response, if any

        Raises:
            EventValidationError: If the event has no device identifier
        """
        if not event.device_id or not str(event.device_id).strip():
            raise EventValidationError(
                "Device event requires a device identifier",
                details={"application": event.application},
            )

        self._received[event.device_id] += 1
        logger.info(
            "events.received",
            device=event.device_id,
            received=self._received[event.device_id],
            application=event.application,
            payload=event.payload,
        )

        payload = self._decider.decide(event)
        if payload is None:
            return None

        command = DeviceCommand(device_id=event.device_id, payload=payload)
        logger.info(
            "events.downlink_sending",
            device=command.device_id,
            payload=payload.to_dict(),
        )
        self._command_channel.send(command)
        return command

    @property
    def received_counts(self) -> Dict[str, int]:
        """Number of accepted events per device since startup."""
        return dict(self._received)

    async def handle(self, event: DeviceEvent) -> None:
        try:
            self.ingest(event)
        except EventValidationError as exc:
            logger.warning("events.rejected", error=exc.message, details=exc.details)

    def start(self) -> None:
        if self._subscription is None:
            self._subscription = self._event_stream.subscribe(
                self.handle, name="event-ingest"
            )

    async def stop(self) -> None:
        if self._subscription is not None:
            await self._event_stream.unsubscribe(self._subscription)
            self._subscription = None
