"""
Gateways Package - Domain Layer

Interfaces for external service communications. Implementations are
provided by the infrastructure layer.
"""

from .registry_gateway import IRegistryGateway

__all__ = ["IRegistryGateway"]
