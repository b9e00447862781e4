"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

MAX_SAME_ACTIVITIES = 1000


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./activity.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp and read back activity timestamps",
    )
    same_activities_limit: int = Field(
        default=MAX_SAME_ACTIVITIES,
        description="Maximum number of same activities returned for one target/action",
        gt=0,
        le=MAX_SAME_ACTIVITIES,
    )
    fanout_max_workers: int = Field(
        default=4,
        description="Number of worker threads running notification fan-out",
        gt=0,
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level applied when the application starts",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["MAX_SAME_ACTIVITIES", "Settings", "get_settings", "reset_settings_cache"]
