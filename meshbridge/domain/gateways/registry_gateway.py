"""
Registry Gateway Interface - Domain Layer

This module defines the interface for communicating with the device registry.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from meshbridge.domain.entities.registry import RegistryDevice


class IRegistryGateway(ABC):
    """Interface for the device registry."""

    @abstractmethod
    async def list_devices(
        self, application: str, labels: Optional[str] = None
    ) -> List[RegistryDevice]:
        """
        List the devices of an application.

        Args:
            application: Application scope of the registry
            labels: Label selector, e.g. ``role=gateway``

        Returns:
            List[RegistryDevice]: Matching devices, empty if there are none

        Raises:
            RegistryUnavailableError: If the registry cannot be queried
        """
        pass

    @abstractmethod
    async def create_device(
        self, application: str, device: RegistryDevice
    ) -> RegistryDevice:
        """
        Create a device record under an application.

        Raises:
            RegistryUnavailableError: If the registry rejects or misses the call
        """
        pass
