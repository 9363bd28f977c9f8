"""Domain ports for the shared, mutable pipeline state."""

from __future__ import annotations

from typing import Optional, Protocol

from meshbridge.domain.entities.claim import ClaimStatus
from meshbridge.domain.entities.display import DisplaySettings


class IDisplayStateStore(Protocol):
    async def update(self, settings: DisplaySettings) -> None:
        """Replace the current settings and publish them."""
        ...

    async def current(self) -> Optional[DisplaySettings]:
        ...


class IClaimStateStore(Protocol):
    async def update(self, status: ClaimStatus) -> None:
        """Replace the current claim status and publish it."""
        ...

    async def current(self) -> ClaimStatus:
        ...
