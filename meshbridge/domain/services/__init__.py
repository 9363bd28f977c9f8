"""Domain services package."""

from .command_translator import translate, validate_display_settings
from .identity import derive_device_uuid

__all__ = ["translate", "validate_display_settings", "derive_device_uuid"]
