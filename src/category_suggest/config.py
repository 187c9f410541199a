"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Search
    search_cats_limit: int = 25
    default_categories: list[str] = []

    # Remote lookup (Wikimedia Commons allcategories query)
    mediawiki_api_url: str = "https://commons.wikimedia.org/w/api.php"
    request_timeout_seconds: float = 10.0
    user_agent: str = "category-suggest/0.1.0"

    # Cache
    cache_max_entries: int | None = None
    cache_write_through: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
