"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    off_search_url: str = "https://world.openfoodfacts.org/cgi/search.pl"
    off_page_size: int = 1
    off_timeout_seconds: float = 15
    off_user_agent: str = "happy-foods/0.1 (mood profile lookup)"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
