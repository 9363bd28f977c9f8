from __future__ import annotations

import asyncio
from typing import List

import pytest

from meshbridge.infrastructure.messaging import BroadcastChannel


def _collector(target: List[int]):
    async def handler(message: int) -> None:
        target.append(message)

    return handler


@pytest.mark.asyncio
async def test_send_delivers_in_order_to_every_subscriber() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("numbers")
    first: List[int] = []
    second: List[int] = []
    channel.subscribe(_collector(first), name="first")
    channel.subscribe(_collector(second), name="second")

    for value in range(5):
        channel.send(value)
    await channel.drain()

    assert first == [0, 1, 2, 3, 4]
    assert second == [0, 1, 2, 3, 4]
    assert channel.subscriber_count == 2

    await channel.close()


@pytest.mark.asyncio
async def test_send_does_not_wait_for_slow_subscriber() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("slow")
    release = asyncio.Event()
    received: List[int] = []

    async def slow(message: int) -> None:
        await release.wait()
        received.append(message)

    subscription = channel.subscribe(slow)

    channel.send(1)
    channel.send(2)
    await asyncio.sleep(0)

    assert received == []
    assert subscription.pending >= 1

    release.set()
    await channel.drain()

    assert received == [1, 2]
    await channel.close()


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_delivery() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("failing")
    received: List[int] = []

    async def flaky(message: int) -> None:
        if message == 1:
            raise ValueError("bad message")
        received.append(message)

    subscription = channel.subscribe(flaky, name="flaky")

    channel.send(1)
    channel.send(2)
    await channel.drain()

    assert received == [2]
    assert subscription.failed == 1
    assert subscription.delivered == 1
    await channel.close()


@pytest.mark.asyncio
async def test_messages_sent_before_subscribing_are_not_replayed() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("late")
    channel.send(1)

    received: List[int] = []
    channel.subscribe(_collector(received))
    channel.send(2)
    await channel.drain()

    assert received == [2]
    await channel.close()


@pytest.mark.asyncio
async def test_unsubscribe_stops_delivery() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("unsubscribe")
    received: List[int] = []
    subscription = channel.subscribe(_collector(received))

    channel.send(1)
    await channel.drain()
    await channel.unsubscribe(subscription)
    channel.send(2)
    await channel.drain()

    assert received == [1]
    assert channel.subscriber_count == 0
    await channel.close()


@pytest.mark.asyncio
async def test_close_rejects_subscribers_and_drops_messages() -> None:
    channel: BroadcastChannel[int] = BroadcastChannel("closed")
    received: List[int] = []
    channel.subscribe(_collector(received))

    await channel.close()
    channel.send(1)

    assert channel.closed is True
    assert channel.subscriber_count == 0
    assert received == []
    with pytest.raises(RuntimeError):
        channel.subscribe(_collector(received))
