"""Application settings using Pydantic Settings for typed configuration.

This module centralizes all configuration and provides type-safe access to settings.
Settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache

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
    database_url: str = Field(default="sqlite:///./rentify.db", alias="DATABASE_URL")
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")
    seed_reference_data: bool = Field(default=True, alias="SEED_REFERENCE_DATA")

    # CORS
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Account rules
    min_user_age: int = Field(default=18, alias="MIN_USER_AGE", ge=0)
    loyalty_email_domain: str = Field(default="@duoc.cl", alias="LOYALTY_EMAIL_DOMAIN")
    referral_bonus_points: int = Field(default=100, alias="REFERRAL_BONUS_POINTS", ge=0)
    referral_code_length: int = Field(
        default=9, alias="REFERRAL_CODE_LENGTH", ge=4, le=20
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
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
