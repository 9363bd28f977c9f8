"""
In-process broadcast channels.

A channel keeps an explicit list of subscriptions. Each subscription owns an
unbounded queue and a consumer task, so ``send`` only enqueues and every
subscriber sees the messages in the order they were sent, independently of
how slow the other subscribers are.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from meshbridge.shared import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Handler = Callable[[T], Awaitable[None]]


class Subscription(Generic[T]):
    """A single subscriber of a channel."""

    def __init__(self, channel_name: str, name: str, handler: Handler) -> None:
        self.channel_name = channel_name
        self.name = name
        self._handler = handler
        self._queue: asyncio.Queue = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self.delivered = 0
        self.failed = 0

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(
                self._run(), name=f"{self.channel_name}:{self.name}"
            )

    def enqueue(self, message: T) -> None:
        self._queue.put_nowait(message)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    async def join(self) -> None:
        await self._queue.join()

    async def cancel(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _run(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                await self._handler(message)
                self.delivered += 1
            except Exception as exc:
                self.failed += 1
                logger.error(
                    "channel.delivery_failed",
                    channel=self.channel_name,
                    subscriber=self.name,
                    error=str(exc),
                    exc_info=exc,
                )
            finally:
                self._queue.task_done()


class BroadcastChannel(Generic[T]):
    """Fire-and-forget fan-out to every current subscriber."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscriptions: List[Subscription[T]] = []
        self._closed = False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, handler: Handler, name: Optional[str] = None) -> Subscription[T]:
        """
        Register a handler for every message sent from now on.

        Must be called from within a running event loop: the subscription's
        consumer task is started immediately.
        """
        if self._closed:
            raise RuntimeError(f"Channel {self.name} is closed")

        subscription: Subscription[T] = Subscription(
            self.name, name or getattr(handler, "__qualname__", "subscriber"), handler
        )
        subscription.start()
        self._subscriptions.append(subscription)
        logger.debug(
            "channel.subscribed",
            channel=self.name,
            subscriber=subscription.name,
            subscribers=len(self._subscriptions),
        )
        return subscription

    async def unsubscribe(self, subscription: Subscription[T]) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
        await subscription.cancel()

    def send(self, message: T) -> None:
        """Enqueue a message for all subscribers without waiting for them."""
        if self._closed:
            logger.warning("channel.send_after_close", channel=self.name)
            return

        for subscription in self._subscriptions:
            subscription.enqueue(message)

        logger.debug(
            "channel.sent",
            channel=self.name,
            subscribers=len(self._subscriptions),
        )

    async def drain(self) -> None:
        """Wait until every subscriber has handled all queued messages."""
        await asyncio.gather(*(s.join() for s in list(self._subscriptions)))

    async def close(self) -> None:
        self._closed = True
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            await subscription.cancel()
        logger.debug("channel.closed", channel=self.name)
