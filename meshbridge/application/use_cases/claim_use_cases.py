"""Claim Use Cases - Application Layer"""

from meshbridge.application.dtos.claim_dto import ClaimRequestDTO, ClaimStatusDTO
from meshbridge.application.services.claim_orchestrator import ClaimOrchestrator
from meshbridge.domain.ports.state import IClaimStateStore


class ClaimDeviceUseCase:
    """Use case for claiming a device with its claim token."""

    def __init__(self, claim_orchestrator: ClaimOrchestrator) -> None:
        self._orchestrator = claim_orchestrator

    async def execute(self, request: ClaimRequestDTO) -> ClaimStatusDTO:
        status = await self._orchestrator.claim(request.token)
        return ClaimStatusDTO.from_domain(status)


class GetClaimStatusUseCase:
    """Use case for reading the latest claim status."""

    def __init__(self, claim_state_store: IClaimStateStore) -> None:
        self._store = claim_state_store

    async def execute(self) -> ClaimStatusDTO:
        return ClaimStatusDTO.from_domain(await self._store.current())
