"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env_name: str = Field(default="development", alias="ENV_NAME")

    # Database
    database_url: str = Field(
        default="sqlite:///./mentor_match.db", alias="DATABASE_URL"
    )
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Tokens
    jwt_secret: str = Field(
        default="your-secret-key-change-in-production", alias="JWT_SECRET"
    )
    jwt_issuer: str = Field(default="mentor-mentee-api", alias="JWT_ISSUER")
    jwt_audience: str = Field(default="mentor-mentee-app", alias="JWT_AUDIENCE")

    # Admin panel
    session_secret_key: str = Field(
        default="change-me-session-secret", alias="SESSION_SECRET_KEY"
    )
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str | None = Field(default=None, alias="ADMIN_PASSWORD")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Profile images
    upload_dir: Path = Field(default=Path("uploads/images"), alias="UPLOAD_DIR")
    max_image_bytes: int = Field(
        default=5 * 1024 * 1024, alias="MAX_IMAGE_BYTES", ge=1
    )

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = []
        for o in self.cors_origins.split(","):
            trimmed = o.strip()
            if trimmed:
                origins.append(trimmed)
        return origins

    @computed_field
    @property
    def admin_enabled(self) -> bool:
        """The admin UI is only mounted once a password is configured."""
        return bool(self.admin_password)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
