"""Runtime settings for the festival notification service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Values read from the environment or a local ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./festival.db",
        description="SQLAlchemy URL of the notification and vendor store",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC+HH:MM offset) used for timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to reach the HTTP API and the websocket",
    )
    frontend_url: str = Field(
        default="http://localhost:4200",
        description="Base URL of the dashboard, used in outbound emails",
    )
    notification_page_size: int = Field(
        default=50, gt=0, description="Default page size for notification listings"
    )
    notification_max_page_size: int = Field(
        default=200, gt=0, description="Upper bound accepted for notification page sizes"
    )
    admin_observes_notifications: bool = Field(
        default=True,
        description="Whether administrators implicitly receive every observable notification",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid key used for vendor payment emails",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="From address of vendor payment emails",
        min_length=3,
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @model_validator(mode="after")
    def _validate_page_sizes(self) -> "Settings":
        if self.notification_page_size > self.notification_max_page_size:
            raise ValueError(
                "NOTIFICATION_PAGE_SIZE cannot exceed NOTIFICATION_MAX_PAGE_SIZE"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the settings, read once per process."""

    return Settings()


def reset_settings_cache() -> None:
    """Forget the cached settings so the next call reads the environment again."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
