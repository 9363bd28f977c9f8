"""Uplink device events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class DeviceEvent:
    """A single uplink message, as handed over by the transport layer.

    The payload is opaque at this level: decoded JSON, raw bytes, or
    whatever the integration produced.
    """

    device_id: str
    payload: Any = None
    application: Optional[str] = None
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
