"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


StoreKind = Literal["memory", "sqlite"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DUCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Rubber Duck API"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_grace_seconds: int = 5
    keep_alive_seconds: int = 120

    # Storage
    store: StoreKind = "memory"
    database_url: str = "sqlite+aiosqlite:///./duck.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
