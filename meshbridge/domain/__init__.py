"""
Domain Layer Package

Entities, errors and the interfaces the bridge depends on (registry
gateway, broadcast channels, downlink decisions). No framework or
infrastructure dependencies live here.
"""

# Re-export submodules
from meshbridge.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
