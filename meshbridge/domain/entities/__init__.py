"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .claim import ClaimStatus, ProvisioningCommand
from .display import (
    DISPLAY_LOCATION,
    CommandPayload,
    DeviceCommand,
    DisplaySettings,
    OnOffSet,
    RawMessage,
)
from .errors import (
    ClaimValidationError,
    CommandValidationError,
    DomainError,
    EventValidationError,
    RegistryUnavailableError,
    SerializationError,
    ValidationError,
)
from .events import DeviceEvent
from .registry import RegistryDevice

__all__ = [
    "DISPLAY_LOCATION",
    "ClaimStatus",
    "ProvisioningCommand",
    "CommandPayload",
    "DeviceCommand",
    "DisplaySettings",
    "OnOffSet",
    "RawMessage",
    "DeviceEvent",
    "RegistryDevice",
    "DomainError",
    "ValidationError",
    "CommandValidationError",
    "EventValidationError",
    "ClaimValidationError",
    "RegistryUnavailableError",
    "SerializationError",
]
