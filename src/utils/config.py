"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identity placeholder until an authentication source exists
    current_lecturer: str = Field(
        default="Current User",
        description="Lecturer name stamped on claims submitted from the console or API",
    )

    # Claim intake
    max_document_mb: int = Field(
        default=5,
        gt=0,
        description="Maximum size of a supporting document in megabytes",
    )
    seed_sample_data: bool = Field(
        default=True,
        description="Load demonstration claims into a fresh store",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Enable debug mode")

    @property
    def max_document_bytes(self) -> int:
        """Document ceiling in bytes."""
        return self.max_document_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to avoid re-reading environment on every call.
    """
    return Settings()
