"""
Display domain entities.

Display settings describe the desired state of a device's display; they are
turned into a Generic OnOff Set command addressed to the display element of
the device.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Dict

# Element slot of the display within the device's command layout.
DISPLAY_LOCATION = 0x100

GENERIC_ONOFF_SET_OPCODE = b"\x82\x02"


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """Desired display state for one device."""

    device: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class RawMessage:
    """Binary message as understood by the device firmware."""

    location: int
    opcode: bytes
    parameters: bytes

    def to_bytes(self) -> bytes:
        """Encode as ``location (u16 BE) | opcode length (u8) | opcode | parameters``."""
        return (
            struct.pack(">HB", self.location, len(self.opcode))
            + self.opcode
            + self.parameters
        )


@dataclass(frozen=True, slots=True)
class OnOffSet:
    """Generic OnOff Set for a single element of the device."""

    on: bool
    location: int = DISPLAY_LOCATION
    tid: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"on": self.on, "location": self.location}

    def to_raw_message(self) -> RawMessage:
        parameters = bytes([1 if self.on else 0, self.tid & 0xFF])
        return RawMessage(
            location=self.location,
            opcode=GENERIC_ONOFF_SET_OPCODE,
            parameters=parameters,
        )


@dataclass(frozen=True, slots=True)
class CommandPayload:
    """Body of a device command."""

    display: OnOffSet

    def to_dict(self) -> Dict[str, Any]:
        return {"display": self.display.to_dict()}

    def to_raw_message(self) -> RawMessage:
        return self.display.to_raw_message()


@dataclass(frozen=True, slots=True)
class DeviceCommand:
    """Outgoing instruction for a single device."""

    device_id: str
    payload: CommandPayload

    @property
    def enabled(self) -> bool:
        return self.payload.display.on
