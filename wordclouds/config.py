from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "WordClouds Admin API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Headless CMS (Strapi)
    cms_url: str = "http://localhost:1337"
    cms_timeout: float = 30.0

    # Session token file; empty keeps the token in memory only
    token_storage_file: str = ""

    # Word cloud rendering
    word_size_base: int = 16
    word_size_scale: int = 4

    # How a failed optimistic update is undone: exact snapshot or full re-fetch
    update_rollback: Literal["snapshot", "refetch"] = "snapshot"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_cms: str = "INFO"              # CMS client and stores
    log_level_sync: str = "INFO"             # Collection cache and session

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
