from __future__ import annotations

import pytest

from meshbridge.domain.entities.claim import ClaimStatus
from meshbridge.infrastructure.state import ClaimStateStore


@pytest.mark.asyncio
async def test_claim_state_defaults_to_unclaimed(recording_publisher) -> None:
    store = ClaimStateStore(recording_publisher)

    assert await store.current() == ClaimStatus(claimed=False, address=None)


@pytest.mark.asyncio
async def test_claim_state_update_overwrites_and_publishes(recording_publisher) -> None:
    store = ClaimStateStore(recording_publisher)
    status = ClaimStatus(claimed=True, address="00c0")

    await store.update(status)

    assert await store.current() == status
    assert recording_publisher.messages == [status]
