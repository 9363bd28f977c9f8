"""Messaging Package - Infrastructure Layer"""

from .broadcast_channel import BroadcastChannel, Subscription

__all__ = ["BroadcastChannel", "Subscription"]
