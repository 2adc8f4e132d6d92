"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(or a local .env file).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    url = f"{settings.swapi_base_url}/people/{settings.swapi_person_id}"

    if settings.is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    DEMO_DELAY_SECONDS_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
    SWAPI_BASE_URL_DEFAULT,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. .env file in the working directory
        3. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Star Wars API
    swapi_base_url: str = Field(
        default=SWAPI_BASE_URL_DEFAULT,
        description="Star Wars API root URL",
    )
    swapi_person_id: int = Field(
        default=1,
        ge=1,
        description="Person resource fetched by the demo",
    )
    request_timeout: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    # Demo behavior
    demo_delay_seconds: float = Field(
        default=DEMO_DELAY_SECONDS_DEFAULT,
        ge=0,
        description="Delay used by the reactive chaining helpers",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the logging level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("swapi_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Require an http(s) URL and remove trailing slashes.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.

        Raises:
            ValueError: If the URL scheme is not http or https.
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("swapi_base_url must start with http:// or https://")
        return v.rstrip("/")

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


settings = get_settings()
