from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    debug: bool = Field(False, alias="KANTIN_DEBUG")

    # Extra area variants merged onto the built-in table
    area_table_path: Path | None = Field(None, alias="KANTIN_AREA_TABLE_PATH")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"], alias="KANTIN_CORS_ORIGINS"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("area_table_path", mode="before")
    def _expand_area_table_path(cls, value: Path | str | None) -> Path | None:
        """Expand user in the area table path; blank means unset."""
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return Path(value).expanduser()

    @field_validator("cors_origins", mode="before")
    def _split_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            origins = [origin.strip() for origin in value.split(",")]
            return [origin for origin in origins if origin] or ["*"]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
