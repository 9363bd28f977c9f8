"""Events Router - Presentation Layer"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from meshbridge.application.dtos.event_dto import DeviceEventDTO, EventAcceptedDTO
from meshbridge.application.use_cases.event_use_cases import SubmitEventUseCase
from meshbridge.domain.entities.errors import ValidationError
from meshbridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/events", tags=["Events"])


@router.post(
    "/", response_model=EventAcceptedDTO, status_code=status.HTTP_202_ACCEPTED
)
@inject
async def submit_event(
    request: DeviceEventDTO,
    submit_event_use_case: SubmitEventUseCase = Depends(
        Provide["submit_event_use_case"]
    ),
) -> EventAcceptedDTO:
    """Hand an uplink event to the event stream without waiting for processing."""
    try:
        return submit_event_use_case.execute(request)
    except ValidationError as e:
        logger.warning("events.submit_rejected", error=e.message)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )
