"""Holder of the latest claim status."""

from __future__ import annotations

import asyncio

from meshbridge.domain.entities.claim import ClaimStatus
from meshbridge.domain.ports.broadcast import IBroadcastPublisher
from meshbridge.shared import get_logger

logger = get_logger(__name__)


class ClaimStateStore:
    """Keeps the latest claim status and broadcasts each update."""

    def __init__(self, channel: IBroadcastPublisher[ClaimStatus]) -> None:
        self._channel = channel
        self._lock = asyncio.Lock()
        self._current = ClaimStatus.unclaimed()

    async def update(self, status: ClaimStatus) -> None:
        async with self._lock:
            self._current = status
            self._channel.send(status)
        logger.info(
            "claim.status_changed", claimed=status.claimed, address=status.address
        )

    async def current(self) -> ClaimStatus:
        async with self._lock:
            return self._current
