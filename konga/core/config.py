"""
Configuration Settings.

This module defines the package configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Only ambient concerns are configurable here. The seed data itself is fixed and is
never influenced by the environment.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="KONGA_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="KONGA_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="KONGA_LOG_FILE_DIR", description="Directory for log files")
    enable_file: bool = Field(
        default=False, alias="KONGA_ENABLE_FILE_LOGGING", description="Write logs to a file as well"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Package settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="KONGA_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Logging format (simple, detailed, json)",
        alias="KONGA_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the file handler writes into",
        alias="KONGA_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Enable the file log handler",
        alias="KONGA_ENABLE_FILE_LOGGING",
    )

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
