"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from meshbridge.shared import EnumEnvironment, EnumLogLevel
from meshbridge.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """Service metadata and HTTP server settings."""

    title: str = Field(default="Meshbridge Console", description="Service title")
    description: str = Field(
        default="Event and command pipeline between constrained wireless "
        "devices and the device registry",
        description="Service description",
    )
    version: str = Field(default="0.1.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class RegistrySettings(BaseSettings):
    """Device registry settings."""

    url: str = Field(
        default="http://localhost:8080", description="Device registry base URL"
    )
    application: str = Field(
        default="default",
        description="Application scope used for all registry operations",
        validation_alias=AliasChoices(
            "REGISTRY_APPLICATION", "DROGUE_APPLICATION_NAME"
        ),
    )
    token: Optional[str] = Field(
        default=None, description="Bearer token for the registry API"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    gateway_labels: str = Field(
        default="role=gateway",
        description="Label selector identifying gateway devices",
    )

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_", case_sensitive=False, extra="ignore"
    )


class ClaimSettings(BaseSettings):
    """Claim workflow settings."""

    address: str = Field(
        default="00c0",
        description="Network address assigned to claimed devices",
    )

    model_config = SettingsConfigDict(
        env_prefix="CLAIM_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)
    claim: ClaimSettings = Field(default_factory=ClaimSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()


settings = get_settings()
