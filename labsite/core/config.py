"""
Application configuration using pydantic-settings.
Manages data source locations, image paths and fetch behaviour.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )
    
    # Application settings
    APP_NAME: str = "Lab Site Data Service"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Data source settings
    # When DATA_BASE_URL is set, sources are fetched over HTTP relative to it;
    # otherwise they are read from DATA_ROOT on the local filesystem.
    DATA_BASE_URL: Optional[str] = None
    DATA_ROOT: str = "public"
    
    @property
    def use_http_sources(self) -> bool:
        """Whether data sources are fetched over HTTP."""
        return bool(self.DATA_BASE_URL)
    
    # Image settings
    PROFESSOR_PHOTO_BASE: str = "photos/prof"
    ACTIVITY_PHOTO_BASE: str = "photos/activity"
    PLACEHOLDER_IMAGE: str = "/api/placeholder/400/400"
    
    # News feed settings
    NEWS_LIMIT: int = 6
    
    # Fetch settings
    FETCH_TIMEOUT_SECONDS: float = 30.0
    FETCH_CONNECT_TIMEOUT_SECONDS: float = 10.0
    FETCH_MAX_RETRIES: int = 1
    FETCH_RETRY_DELAY_SECONDS: float = 1.0
    FETCH_MAX_CONCURRENCY: int = 5


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
