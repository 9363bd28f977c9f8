"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .claim_dto import ClaimRequestDTO, ClaimStatusDTO
from .display_dto import DeviceCommandDTO, DisplaySettingsDTO
from .event_dto import DeviceEventDTO, EventAcceptedDTO
from .health_dto import ChannelStatusDTO, SystemHealthDTO

__all__ = [
    "ClaimRequestDTO",
    "ClaimStatusDTO",
    "DeviceCommandDTO",
    "DisplaySettingsDTO",
    "DeviceEventDTO",
    "EventAcceptedDTO",
    "ChannelStatusDTO",
    "SystemHealthDTO",
]
