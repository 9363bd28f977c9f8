"""Domain ports for fire-and-forget broadcast channels."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class IBroadcastPublisher(Protocol[T_contra]):
    """Sending side of a channel.

    ``send`` never waits for subscribers; every subscriber receives messages
    in the order they were sent.
    """

    def send(self, message: T_contra) -> None:
        ...


class IBroadcastChannel(Protocol[T]):
    """A channel that can also be subscribed to."""

    name: str

    def send(self, message: T) -> None:
        ...

    def subscribe(
        self, handler: Callable[[T], Awaitable[None]], name: Optional[str] = None
    ) -> Any:
        """Register a handler; returns a subscription handle."""
        ...

    async def unsubscribe(self, subscription: Any) -> None:
        ...
