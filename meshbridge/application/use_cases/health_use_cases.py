"""Use case for the liveness endpoint."""

from typing import Iterable

from meshbridge.application.dtos.health_dto import ChannelStatusDTO, SystemHealthDTO


class GetHealthStatusUseCase:
    """Reports the state of the broadcast channels."""

    def __init__(self, channels: Iterable, application: str) -> None:
        self._channels = list(channels)
        self._application = application

    async def execute(self) -> SystemHealthDTO:
        channels = {
            channel.name: ChannelStatusDTO(
                subscribers=channel.subscriber_count, closed=channel.closed
            )
            for channel in self._channels
        }
        degraded = any(status.closed for status in channels.values())
        return SystemHealthDTO(
            status="degraded" if degraded else "up",
            application=self._application,
            channels=channels,
        )
