"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class CorsSettings(BaseModel):
    """Cross-origin settings for browser consumers of the API."""

    allow_origins: list[str] = ["*"]


class ExportSettings(BaseModel):
    """
    Client export settings.

    columns: Ordered column keys rendered in CSV and spreadsheet exports.
        Allowed keys: id, shared_key, name, email, phone, created_at.
    sheet_name: Title of the single worksheet in spreadsheet exports.
    """

    columns: list[str] = ["id", "shared_key", "name", "email", "phone", "created_at"]
    sheet_name: str = "Clients"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: EXPORT__SHEET_NAME=Registry, CORS__ALLOW_ORIGINS='["https://intranet.local"]'
    """

    # Application metadata
    app_name: str = "Client Registry API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/clients"

    # Nested settings groups
    cors: CorsSettings = CorsSettings()
    export: ExportSettings = ExportSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
