# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.MET_API_BASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a default, so the server runs with no configuration.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Upstream Services
    # -------------------------------------------------------------------------

    MET_API_BASE_URL: str = Field(
        default="https://collectionapi.metmuseum.org/public/collection/v1",
        description="Base URL of the Met collection API"
    )

    TRANSLATE_URL: str = Field(
        default="https://translate.googleapis.com/translate_a/single",
        description="Translation endpoint (translate_a/single protocol)"
    )

    SOURCE_LANGUAGE: str = Field(
        default="en",
        min_length=2,
        description="Language of the collection API text fields"
    )

    TARGET_LANGUAGE: str = Field(
        default="es",
        min_length=2,
        description="Language the UI translates into"
    )

    # -------------------------------------------------------------------------
    # HTTP Client
    # -------------------------------------------------------------------------

    HTTP_TIMEOUT_SECONDS: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for each outbound request"
    )

    USER_AGENT: str = Field(
        default="met-explorer/1.0",
        min_length=1,
        description="User-Agent sent to upstream services"
    )

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------

    SEARCH_PAGE_SIZE: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Objects per page on /search"
    )

    RESULTS_PAGE_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Objects per page on /results"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the web server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the web server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
