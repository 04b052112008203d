"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["dev", "staging", "prod"] = "dev"

    # Normalization defaults
    add_checksum: bool = Field(False, description="Append optional check digits (ITF)")
    upce_fallback: bool = Field(False, description="Fall back to UPC-A for non-compressible UPC-E")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "prod"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
