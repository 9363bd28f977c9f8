"""
Presentation Layer Package

FastAPI routers exposing display configuration, claims, uplink submission
and health.
"""

from meshbridge.presentation import controllers

__all__ = ["controllers"]
