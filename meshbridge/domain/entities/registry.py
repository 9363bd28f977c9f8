"""Domain entities for devices held by the device registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class RegistryDevice:
    """A device record as stored by the registry.

    ``gateway_names`` is the gateway selector: the names of the gateways the
    device may route through. It is always a list, possibly empty.
    """

    name: str
    application: str
    aliases: List[str] = field(default_factory=list)
    gateway_names: List[str] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        """Render the registry's JSON representation of the device."""
        metadata: Dict[str, Any] = {
            "name": self.name,
            "application": self.application,
        }
        if self.labels:
            metadata["labels"] = dict(self.labels)

        return {
            "metadata": metadata,
            "spec": {
                "alias": list(self.aliases),
                "gatewaySelector": {"matchNames": list(self.gateway_names)},
            },
        }
