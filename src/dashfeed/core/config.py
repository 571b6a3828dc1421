# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dashfeed import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DASHFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # HTTP client (seconds)
    request_timeout: float = 30.0
    user_agent: str = f"dashfeed/{__version__}"

    # Retry policy applied when a call does not pass its own
    retry_max_retries: int = 0
    retry_base_delay: float = 1.0
    retry_max_delay: float = 10.0

    @field_validator("retry_max_retries")
    @classmethod
    def _non_negative_retries(cls, v: int) -> int:
        if v < 0:
            raise ValueError("retry_max_retries must be >= 0")
        return v

    # Response cache
    cache_ttl: float = 300.0
    cache_max_size: int = 0  # 0 = unbounded

    # News provider
    news_api_key: str = ""
    news_base_url: str = "https://newsapi.org/v2"

    # Movie provider
    tmdb_api_key: str = ""
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_image_base_url: str = "https://image.tmdb.org/t/p/w500"

    @field_validator("news_base_url", "tmdb_base_url", "tmdb_image_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
