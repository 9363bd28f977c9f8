"""
Display Use Cases - Application Layer

Reading and changing the display settings. Changing them publishes the new
value; the command translator turns it into the device command.
"""

from typing import Optional

from meshbridge.application.dtos.display_dto import (
    DeviceCommandDTO,
    DisplaySettingsDTO,
)
from meshbridge.domain.ports.state import IDisplayStateStore
from meshbridge.domain.services.command_translator import translate
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class UpdateDisplaySettingsUseCase:
    """Use case for changing the display settings."""

    def __init__(self, display_state_store: IDisplayStateStore) -> None:
        self._store = display_state_store

    async def execute(self, request: DisplaySettingsDTO) -> DeviceCommandDTO:
        """
        Store and publish new display settings.

        Returns:
            DeviceCommandDTO: The command the change translates to

        Raises:
            CommandValidationError: If the settings cannot be addressed
        """
        settings = request.to_domain()
        # Validates before anything is stored or published.
        command = translate(settings)

        await self._store.update(settings)

        logger.info(
            "display.update_accepted",
            device=settings.device,
            enabled=settings.enabled,
        )
        return DeviceCommandDTO.from_domain(command)


class GetDisplaySettingsUseCase:
    """Use case for reading the current display settings."""

    def __init__(self, display_state_store: IDisplayStateStore) -> None:
        self._store = display_state_store

    async def execute(self) -> Optional[DisplaySettingsDTO]:
        settings = await self._store.current()
        if settings is None:
            return None
        return DisplaySettingsDTO.from_domain(settings)
