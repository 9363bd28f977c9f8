from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumChannel(str, Enum):
    """Names of the in-process broadcast channels."""

    EVENT_STREAM = "event-stream"
    DISPLAY_CHANGES = "display-changes"
    DEVICE_COMMANDS = "device-commands"
    GATEWAY_COMMANDS = "gateway-commands"
    CLAIM_STATUS = "claim-status"
