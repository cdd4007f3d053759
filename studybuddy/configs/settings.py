"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from studybuddy.configs.base import BaseSettings
from studybuddy.configs.database import DatabaseSettings
from studybuddy.core.document_processing.configs import RAGSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    rag: RAGSettings = RAGSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once at first access.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
