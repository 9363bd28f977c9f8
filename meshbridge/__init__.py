"""
Meshbridge Root Module

Bridges constrained wireless devices and a backend device registry:
uplink events come in, display changes go out as device commands, and
claimed devices are registered against the gateways they may route through.

Layer Structure:
- Domain: Entities, errors and gateway/port interfaces
- Application: Use cases, DTOs and the command/claim pipeline services
- Infrastructure: Registry HTTP gateway, broadcast channels, state stores
- Presentation: FastAPI routers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
