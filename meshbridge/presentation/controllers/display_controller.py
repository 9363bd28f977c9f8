"""
Display Router - Presentation Layer

Endpoints for reading and changing the display settings.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from meshbridge.application.dtos.display_dto import (
    DeviceCommandDTO,
    DisplaySettingsDTO,
)
from meshbridge.application.use_cases.display_use_cases import (
    GetDisplaySettingsUseCase,
    UpdateDisplaySettingsUseCase,
)
from meshbridge.domain.entities.errors import ValidationError
from meshbridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/display", tags=["Display"])


@router.get("/", response_model=DisplaySettingsDTO)
@inject
async def get_display_settings(
    get_display_settings_use_case: GetDisplaySettingsUseCase = Depends(
        Provide["get_display_settings_use_case"]
    ),
) -> DisplaySettingsDTO:
    """Return the current display settings, 404 if none were set yet."""
    settings = await get_display_settings_use_case.execute()
    if settings is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No display settings have been set",
        )
    return settings


@router.put("/", response_model=DeviceCommandDTO)
@inject
async def update_display_settings(
    request: DisplaySettingsDTO,
    update_display_settings_use_case: UpdateDisplaySettingsUseCase = Depends(
        Provide["update_display_settings_use_case"]
    ),
) -> DeviceCommandDTO:
    """
    Change the display settings.

    The new value is broadcast on the display channel and translated into a
    command for the device; the response shows that command.
    """
    logger.info("display.update_requested", device=request.device)

    try:
        return await update_display_settings_use_case.execute(request)

    except ValidationError as e:
        logger.warning("display.update_rejected", error=e.message, details=e.details)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )
