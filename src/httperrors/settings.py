"""Pydantic settings for httperrors logging."""

from __future__ import annotations

from functools import lru_cache
from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Runtime configuration read from ``HTTPERRORS_*`` environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="HTTPERRORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Level applied to the httperrors loggers.",
    )
    log_json: bool = Field(
        default=True,
        description="Emit structured JSON log lines instead of plain text.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        """Upper-case level names and reject unknown ones."""

        if isinstance(value, str):
            candidate = value.strip().upper()
            if candidate not in VALID_LOG_LEVELS:
                raise ValueError(f"Unknown log level: {value}")
            return candidate
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


__all__ = ["Settings", "VALID_LOG_LEVELS", "get_settings"]
