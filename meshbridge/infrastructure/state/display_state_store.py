"""Holder of the current display settings."""

from __future__ import annotations

import asyncio
from typing import Optional

from meshbridge.domain.entities.display import DisplaySettings
from meshbridge.domain.ports.broadcast import IBroadcastPublisher
from meshbridge.domain.services.command_translator import validate_display_settings
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class DisplayStateStore:
    """Keeps the last display settings and publishes every change.

    The value is replaced and enqueued on the channel under the same lock,
    so subscribers see changes in write order and readers never observe a
    value that has not been published.
    """

    def __init__(self, channel: IBroadcastPublisher[DisplaySettings]) -> None:
        self._channel = channel
        self._lock = asyncio.Lock()
        self._current: Optional[DisplaySettings] = None

    async def update(self, settings: DisplaySettings) -> None:
        """
        Replace the current settings and publish them.

        Raises:
            CommandValidationError: If the settings name no device
        """
        validate_display_settings(settings)
        async with self._lock:
            self._current = settings
            self._channel.send(settings)
        logger.info(
            "display.settings_changed",
            device=settings.device,
            enabled=settings.enabled,
        )

    async def current(self) -> Optional[DisplaySettings]:
        async with self._lock:
            return self._current
