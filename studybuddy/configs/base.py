"""
Base configuration settings.

Shared .env loading plus the process-level logging options read by the
API lifespan before any router or background task logs.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class: .env loading, environment name and log setup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name attached to the startup log line",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for request and indexing logs",
    )
    quiet_loggers: list[str] = Field(
        default=["urllib3", "botocore", "httpx"],
        description="Third-party loggers capped at WARNING (JSON list in the environment)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level
