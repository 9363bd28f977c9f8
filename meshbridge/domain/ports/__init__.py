"""Domain ports package."""

from .broadcast import IBroadcastChannel, IBroadcastPublisher
from .downlink import IDownlinkDecider, NoDownlink
from .state import IClaimStateStore, IDisplayStateStore

__all__ = [
    "IBroadcastChannel",
    "IBroadcastPublisher",
    "IDownlinkDecider",
    "NoDownlink",
    "IClaimStateStore",
    "IDisplayStateStore",
]
