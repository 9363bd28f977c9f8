"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when input to the pipeline is malformed."""


class CommandValidationError(ValidationError):
    """Raised when display settings cannot be turned into a device command."""


class EventValidationError(ValidationError):
    """Raised when an uplink event lacks a device identifier."""


class ClaimValidationError(ValidationError):
    """Raised when a claim request carries no usable token."""


class RegistryUnavailableError(DomainError):
    """Raised when the device registry cannot be read or written."""

    def __init__(
        self,
        operation: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        message = f"Device registry unavailable during {operation}: {reason}"
        super().__init__(message, details)


class SerializationError(DomainError):
    """Raised when an entity cannot be serialized for diagnostics."""
