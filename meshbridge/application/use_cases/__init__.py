"""
Use Cases Package - Application Layer

Use cases called by the presentation layer. They translate DTOs into domain
values and delegate to the pipeline services and state stores.
"""

from .claim_use_cases import ClaimDeviceUseCase, GetClaimStatusUseCase
from .display_use_cases import GetDisplaySettingsUseCase, UpdateDisplaySettingsUseCase
from .event_use_cases import SubmitEventUseCase
from .health_use_cases import GetHealthStatusUseCase

__all__ = [
    "ClaimDeviceUseCase",
    "GetClaimStatusUseCase",
    "GetDisplaySettingsUseCase",
    "UpdateDisplaySettingsUseCase",
    "SubmitEventUseCase",
    "GetHealthStatusUseCase",
]
