"""
Application settings using Pydantic.

Provides environment-based configuration loading with PARAMCONF_ prefix.
Only the store factory and the declarations loader read these; the providers and the store client take
explicit arguments so tests can build them directly.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # AWS
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None
    aws_profile: str | None = None

    # Bulk fetch
    max_concurrent_chunks: int = 10

    # get_parameter retries
    retry_max_attempts: int = 10
    retry_backoff_multiplier: float = 2.0
    retry_backoff_min: float = 1.0
    retry_backoff_max: float = 30.0

    # Reload jitter (seconds)
    reload_jitter_base: float = 0.5
    reload_jitter_spread: float = 0.25

    # Environment used to pick the declarations file
    environment: str = "local"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "PARAMCONF_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
