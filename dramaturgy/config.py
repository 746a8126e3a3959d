"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC offset) used to store and compare timestamps",
    )
    notification_default_limit: int = Field(
        default=10,
        description="Number of notifications returned when no usable limit is requested",
        gt=0,
    )
    notification_max_limit: int = Field(
        default=100,
        description="Hard cap applied to the requested notification page size",
        gt=0,
    )
    pending_reply_window_days: int = Field(
        default=7,
        description="Rolling window, in days, used to count new replies for regular users",
        gt=0,
    )
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @model_validator(mode="after")
    def _validate_notification_limits(self) -> "Settings":
        if self.notification_default_limit > self.notification_max_limit:
            raise ValueError(
                "NOTIFICATION_DEFAULT_LIMIT cannot exceed NOTIFICATION_MAX_LIMIT"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
