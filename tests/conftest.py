from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from meshbridge.domain.entities.errors import RegistryUnavailableError  # noqa: E402
from meshbridge.domain.entities.registry import RegistryDevice  # noqa: E402
from meshbridge.domain.gateways.registry_gateway import IRegistryGateway  # noqa: E402


class RecordingPublisher:
    """Channel stand-in that keeps every sent message."""

    def __init__(self, name: str = "recording") -> None:
        self.name = name
        self.messages: List[Any] = []

    def send(self, message: Any) -> None:
        self.messages.append(message)


class StubRegistryGateway(IRegistryGateway):
    def __init__(
        self,
        gateways: Optional[List[str]] = None,
        *,
        fail_on_list: bool = False,
        fail_on_create: bool = False,
    ) -> None:
        self.gateways = list(gateways or [])
        self.fail_on_list = fail_on_list
        self.fail_on_create = fail_on_create
        self.list_calls: List[Tuple[str, Optional[str]]] = []
        self.created: List[Tuple[str, RegistryDevice]] = []

    async def list_devices(
        self, application: str, labels: Optional[str] = None
    ) -> List[RegistryDevice]:
        self.list_calls.append((application, labels))
        if self.fail_on_list:
            raise RegistryUnavailableError("list_devices", "connection refused")
        return [
            RegistryDevice(name=name, application=application, labels={"role": "gateway"})
            for name in self.gateways
        ]

    async def create_device(
        self, application: str, device: RegistryDevice
    ) -> RegistryDevice:
        if self.fail_on_create:
            raise RegistryUnavailableError("create_device", "HTTP 503")
        self.created.append((application, device))
        return device


@pytest.fixture()
def recording_publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture()
def stub_registry() -> StubRegistryGateway:
    return StubRegistryGateway(gateways=["gw-1", "gw-2"])
