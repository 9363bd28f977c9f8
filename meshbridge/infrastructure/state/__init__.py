"""State Package - Infrastructure Layer"""

from .claim_state_store import ClaimStateStore
from .display_state_store import DisplayStateStore

__all__ = ["ClaimStateStore", "DisplayStateStore"]
