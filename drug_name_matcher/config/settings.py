"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Drug Name Matcher")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    workers: int = Field(default=1)

    # Catalog (None means the packaged sample catalog)
    catalog_path: Optional[str] = Field(default=None)

    # Search defaults for the HTTP layer
    default_algorithm: str = Field(default="combined")
    default_threshold: int = Field(default=50)
    default_limit: int = Field(default=3)
    max_query_length: int = Field(default=100)
    max_batch_size: int = Field(default=50)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
