"""
Claims Router - Presentation Layer

Endpoints for claiming devices and following the claim status.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from meshbridge.application.dtos.claim_dto import ClaimRequestDTO, ClaimStatusDTO
from meshbridge.application.use_cases.claim_use_cases import (
    ClaimDeviceUseCase,
    GetClaimStatusUseCase,
)
from meshbridge.domain.entities.errors import ValidationError
from meshbridge.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/claims", tags=["Claims"])


@router.post("/", response_model=ClaimStatusDTO)
@inject
async def claim_device(
    request: ClaimRequestDTO,
    claim_device_use_case: ClaimDeviceUseCase = Depends(
        Provide["claim_device_use_case"]
    ),
) -> ClaimStatusDTO:
    """
    Claim a device.

    A registry failure does not raise: the response reports
    ``claimed=false`` and no provisioning command is sent.
    """
    logger.info("claims.requested", token=request.token)

    try:
        claim_status = await claim_device_use_case.execute(request)

    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )

    logger.info("claims.processed", claimed=claim_status.claimed)
    return claim_status


@router.get("/status", response_model=ClaimStatusDTO)
@inject
async def get_claim_status(
    get_claim_status_use_case: GetClaimStatusUseCase = Depends(
        Provide["get_claim_status_use_case"]
    ),
) -> ClaimStatusDTO:
    """Return the latest claim status."""
    return await get_claim_status_use_case.execute()
