"""
Controllers Package - Presentation Layer

FastAPI routers: input validation, error mapping and delegation to the
application use cases.
"""

from .claims_controller import router as claims_router
from .display_controller import router as display_router
from .events_controller import router as events_router
from .system_controller import router as system_router

__all__ = ["claims_router", "display_router", "events_router", "system_router"]
