"""Application configuration using pydantic-settings."""
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./bookmarks.db"

    # "sql" persists to DATABASE_URL; "memory" keeps bookmarks in the process
    storage_backend: Literal["sql", "memory"] = "sql"

    # Shared secret expected in the `Authorization: Bearer <token>` header.
    # Empty means every bookmark request is rejected.
    api_token: str = ""

    # Route prefix for the bookmark endpoints (e.g. "/api" -> /api/bookmarks)
    api_prefix: str = ""

    log_level: str = "INFO"

    # Development convenience - issues CREATE TABLE for missing tables on startup
    create_tables: bool = False

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Ensure a leading slash and no trailing slash ("" stays "")."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Log level names are upper case in the logging module."""
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
