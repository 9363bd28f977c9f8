"""Domain port for downlink decisions taken while an uplink is processed."""

from __future__ import annotations

from typing import Optional, Protocol

from meshbridge.domain.entities.display import CommandPayload
from meshbridge.domain.entities.events import DeviceEvent


class IDownlinkDecider(Protocol):
    """Decides whether an uplink should be answered with a command.

    Runs inside the device's receive window, so implementations must be
    synchronous and must not perform I/O.
    """

    def decide(self, event: DeviceEvent) -> Optional[CommandPayload]:
        ...


class NoDownlink:
    """Observe-only policy: never answers an uplink."""

    def decide(self, event: DeviceEvent) -> Optional[CommandPayload]:
        return None
