"""
Claim Orchestrator - Application Layer

Claims a device: derives its identity from the claim token, registers it
against the currently known gateways, and asks the gateways to provision it.
A registry failure aborts the claim before anything is published.
"""

from __future__ import annotations

import asyncio
import json
import weakref
from typing import List

from meshbridge.domain.entities.claim import ClaimStatus, ProvisioningCommand
from meshbridge.domain.entities.errors import (
    ClaimValidationError,
    RegistryUnavailableError,
    SerializationError,
)
from meshbridge.domain.entities.registry import RegistryDevice
from meshbridge.domain.gateways.registry_gateway import IRegistryGateway
from meshbridge.domain.ports.broadcast import IBroadcastPublisher
from meshbridge.domain.ports.state import IClaimStateStore
from meshbridge.domain.services.identity import derive_device_uuid
from meshbridge.shared import get_logger

logger = get_logger(__name__)

DEFAULT_GATEWAY_LABELS = "role=gateway"


def serialize_device(device: RegistryDevice) -> str:
    """Render a device as JSON for diagnostic logging."""
    try:
        return json.dumps(device.to_document(), sort_keys=True)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Unable to serialize device {device.name!r}: {exc}",
            details={"device": device.name},
        ) from exc


class ClaimOrchestrator:
    """Runs the claim workflow.

    Claims for the same token are serialized; claims for different tokens
    run concurrently.
    """

    def __init__(
        self,
        registry_gateway: IRegistryGateway,
        provisioning_channel: IBroadcastPublisher[ProvisioningCommand],
        claim_state: IClaimStateStore,
        application: str,
        address: str,
        gateway_labels: str = DEFAULT_GATEWAY_LABELS,
    ) -> None:
        self._registry = registry_gateway
        self._provisioning_channel = provisioning_channel
        self._claim_state = claim_state
        self._application = application
        # TODO: allocate addresses from a pool once a per-caller claim lookup exists
        self._address = address
        self._gateway_labels = gateway_labels
        self._token_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def _lock_for(self, token: str) -> asyncio.Lock:
        lock = self._token_locks.get(token)
        if lock is None:
            lock = asyncio.Lock()
            self._token_locks[token] = lock
        return lock

    async def claim(self, token: str) -> ClaimStatus:
        """
        Claim the device identified by ``token``.

        Returns:
            ClaimStatus: ``claimed=True`` with the assigned address, or
            ``claimed=False`` when the registry could not be updated

        Raises:
            ClaimValidationError: If the token is empty
        """
        if not isinstance(token, str) or not token.strip():
            raise ClaimValidationError("Claim token must not be empty")

        async with self._lock_for(token):
            return await self._claim(token)

    async def _claim(self, token: str) -> ClaimStatus:
        device_uuid = str(derive_device_uuid(token))
        address = self._address

        logger.info(
            "claim.started",
            token=token,
            uuid=device_uuid,
            address=address,
            application=self._application,
        )

        try:
            gateways = await self._discover_gateways()
            device = RegistryDevice(
                name=token,
                application=self._application,
                aliases=[address, device_uuid],
                gateway_names=gateways,
            )
            self._log_device(device)
            await self._registry.create_device(self._application, device)

        except RegistryUnavailableError as exc:
            logger.error(
                "claim.registry_unavailable",
                token=token,
                operation=exc.operation,
                error=exc.message,
            )
            return ClaimStatus.unclaimed()

        self._provisioning_channel.send(
            ProvisioningCommand(device=device_uuid, address=address)
        )

        status = ClaimStatus(claimed=True, address=address)
        await self._claim_state.update(status)

        logger.info("claim.completed", token=token, uuid=device_uuid, address=address)
        return status

    async def _discover_gateways(self) -> List[str]:
        devices = await self._registry.list_devices(
            self._application, self._gateway_labels
        )
        gateways = [device.name for device in devices or [] if device.name]
        logger.info("claim.gateways_discovered", gateways=gateways)
        return gateways

    def _log_device(self, device: RegistryDevice) -> None:
        try:
            logger.info("claim.device_creating", device=serialize_device(device))
        except SerializationError as exc:
            logger.warning(
                "claim.device_serialization_failed",
                device=device.name,
                error=exc.message,
            )
