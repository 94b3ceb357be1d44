"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseModel):
    base_url: str = Field(
        default="/api/streamline",
        description="Same-origin proxy path (or absolute URL) forwarding to the icon catalog.",
    )
    origin: AnyHttpUrl = Field(
        default="http://localhost:8080",
        description="Origin that relative proxy paths are resolved against.",
    )
    family_slug: str = Field(default="streamline-light", min_length=1)
    per_page: int = Field(default=100, ge=1)
    download_size: int = Field(default=48, ge=1)
    request_timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout; None leaves in-flight requests unbounded.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")

    @property
    def is_relative(self) -> bool:
        return not self.base_url.startswith(("http://", "https://"))


class SearchSettings(BaseModel):
    debounce_seconds: float = Field(default=0.5, ge=0)


class NotificationSettings(BaseModel):
    success_seconds: float = Field(default=3.0, gt=0)
    error_seconds: float = Field(default=4.0, gt=0)
    success_color: str = "#107c10"
    error_color: str = "#d13438"


class WidgetSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ICON_FINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    default_language: str = "en"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)


@lru_cache
def get_settings() -> WidgetSettings:
    """Return cached settings instance."""

    return WidgetSettings()


__all__ = [
    "CatalogSettings",
    "NotificationSettings",
    "SearchSettings",
    "WidgetSettings",
    "get_settings",
]
