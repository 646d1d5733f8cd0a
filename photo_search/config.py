"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhotoSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PHOTO_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    access_key: SecretStr | None = Field(
        default=None,
        description="Static API access key sent as the client_id query parameter.",
    )
    default_per_page: int = Field(default=80, ge=1, le=80)
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Overrides the transport's default timeout when set.",
    )
    log_level: str = "INFO"

    @field_validator("access_key", "request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def client_id(self) -> str | None:
        if self.access_key is None:
            return None
        return self.access_key.get_secret_value() or None


@lru_cache
def get_settings() -> PhotoSearchSettings:
    """Return cached settings instance."""

    return PhotoSearchSettings()


__all__ = ["PhotoSearchSettings", "get_settings"]
