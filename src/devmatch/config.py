"""
Application configuration using Pydantic Settings.
Loads from environment variables prefixed with ``DEVMATCH_`` and a .env file.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the matching API."""

    model_config = SettingsConfigDict(
        env_prefix="DEVMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_limit: int = Field(default=20, ge=1, description="Matches returned when no limit is sent")
    max_limit: int = Field(default=100, ge=1, description="Largest limit a request may ask for")
    preview_sample_size: int = Field(default=6, ge=0)
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def _ensure_default_within_max(self) -> "Settings":
        if self.default_limit > self.max_limit:
            raise ValueError("default_limit cannot be greater than max_limit")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
