"""Claim and provisioning entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class ClaimStatus:
    """Outcome of the most recent claim."""

    claimed: bool
    address: Optional[str] = None

    @classmethod
    def unclaimed(cls) -> "ClaimStatus":
        return cls(claimed=False, address=None)


@dataclass(frozen=True, slots=True)
class ProvisioningCommand:
    """Instructs gateways to provision a device at the given address."""

    device: str
    address: str

    def to_dict(self) -> Dict[str, Any]:
        return {"device": self.device, "address": self.address}
