"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel
from src.shared.env import load_secret_file_variables  # noqa: F401


class GESettings(BaseSettings):
    """HTTP service settings."""

    title: str = Field(default="SenML Datastore Data Source", description="API title")
    description: str = Field(
        default="Dashboard data source serving time series and registry "
        "options from a SenML historical datastore",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class DatastoreSettings(BaseSettings):
    """Historical datastore connection settings."""

    url: str = Field(
        default="http://localhost:8085",
        description="Base URL of the historical datastore",
        validation_alias=AliasChoices("DATASTORE_URL", "HDS_URL"),
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (None waits indefinitely)",
    )
    verify_tls: bool = Field(
        default=True, description="Verify certificates of https datastores"
    )

    model_config = SettingsConfigDict(
        env_prefix="DATASTORE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
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
    datastore: DatastoreSettings = Field(default_factory=DatastoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

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
