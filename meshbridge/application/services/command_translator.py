"""
Command Translator - Application Layer

Listens to display changes and emits exactly one device command per
published value, in the order the values were published.
"""

from __future__ import annotations

from typing import Any, Optional

from meshbridge.domain.entities.display import DeviceCommand, DisplaySettings
from meshbridge.domain.entities.errors import CommandValidationError
from meshbridge.domain.ports.broadcast import IBroadcastChannel, IBroadcastPublisher
from meshbridge.domain.services.command_translator import translate
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class CommandTranslator:
    """Turns display settings into device commands."""

    def __init__(
        self,
        display_channel: IBroadcastChannel[DisplaySettings],
        command_channel: IBroadcastPublisher[DeviceCommand],
    ) -> None:
        self._display_channel = display_channel
        self._command_channel = command_channel
        self._subscription: Optional[Any] = None

    def translate(self, settings: DisplaySettings) -> DeviceCommand:
        return translate(settings)

    async def handle(self, settings: DisplaySettings) -> None:
        try:
            command = self.translate(settings)
        except CommandValidationError as exc:
            logger.warning(
                "display.settings_rejected", error=exc.message, details=exc.details
            )
            return

        logger.info(
            "display.command_sending",
            device=command.device_id,
            payload=command.payload.to_dict(),
        )
        self._command_channel.send(command)

    def start(self) -> None:
        if self._subscription is None:
            self._subscription = self._display_channel.subscribe(
                self.handle, name="command-translator"
            )

    async def stop(self) -> None:
        if self._subscription is not None:
            await self._display_channel.unsubscribe(self._subscription)
            self._subscription = None
