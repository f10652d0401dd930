"""Typed settings configuration - single source of truth."""

import uuid
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str | None = None
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Local development: requests without an Authorization header
    # resolve to this fixed tenant/user pair when enabled.
    allow_dev_context: bool = False
    dev_tenant_id: uuid.UUID = uuid.UUID("00000000-0000-0000-0000-000000000001")
    dev_user_id: uuid.UUID = uuid.UUID("00000000-0000-0000-0000-000000000002")

    # Pagination
    default_page_size: int = 50
    max_page_size: int = 200


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
