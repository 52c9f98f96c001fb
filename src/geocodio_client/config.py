"""Configuration management for the Geocodio client using pydantic-settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://api.geocod.io/v1/"


class GeocodioSettings(BaseSettings):
    """Client settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="GEOCODIO_",
        env_file=".env",
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Geocodio API key",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API origin including version, e.g. http://api.geocod.io/v1/",
    )
    timeout: float = Field(
        default=60.0,
        description="Timeout for Geocodio API requests in seconds",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path to log file",
    )


def get_settings() -> GeocodioSettings:
    """Get client settings instance."""
    return GeocodioSettings()
