"""Process configuration.

Values come from ``STAR_RATING_*`` environment variables or a ``.env`` file
in the working directory. Only process-level concerns live here; the render
itself is configured per request through query parameters.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from star_rating.cache import DEFAULT_TTL_SECONDS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STAR_RATING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Directory holding Images/star-fill.png and Images/star-blank.png
    content_root: Path = Field(default_factory=Path.cwd)

    host: str = "127.0.0.1"
    port: int = 8000

    cache_ttl_seconds: float = Field(default=DEFAULT_TTL_SECONDS, gt=0)

    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
