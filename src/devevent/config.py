"""Configuration management for DevEvent."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Supports loading from .env files and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: str = ""
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False

    # Runtime
    environment: Literal["development", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False
    base_url: str = "http://localhost:8000"

    # CORS settings - stored as comma-separated string for env var compatibility
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        validation_alias="CORS_ALLOWED_ORIGINS",
    )

    # Image uploads
    upload_backend: Literal["local", "cloudinary"] = "local"
    upload_folder: str = "DevEvent"
    images_dir: str = "./data/images"
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""

    # Landing page
    page_cache_seconds: int = 3600

    @property
    def is_development(self) -> bool:
        """Whether diagnostic details may be exposed in error responses."""
        return self.environment == "development"

    @property
    def images_path(self) -> Path:
        """Get the local image directory path."""
        return Path(self.images_dir)

    @property
    def cors_allowed_origins(self) -> list[str]:
        """CORS allowed origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
