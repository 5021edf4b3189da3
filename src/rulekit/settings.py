"""Typed configuration backed by environment variables."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_ENV_FILES: tuple[Path, ...] = (Path(".env"),)


class Settings(BaseSettings):
    """Library configuration loaded from the environment and an optional `.env` file."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="RULEKIT_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    time_format: str = Field(
        default="%Y-%m-%d %H:%M:%S %z %Z",
        description="strftime format used when a timezone-aware datetime is rendered into a message.",
    )
    naive_time_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="strftime format used when a naive datetime is rendered into a message.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Level applied by rulekit.logging.configure() when no level is passed.",
    )


def _existing_env_files() -> list[str]:
    return [str(path) for path in _DEFAULT_ENV_FILES if path.exists()]


@lru_cache
def get_settings(_env_files: Sequence[str] | None = None) -> Settings:
    """Return cached settings, reading `.env` files when present."""

    env_files = list(_env_files) if _env_files is not None else _existing_env_files()
    if env_files:
        return Settings(_env_file=tuple(env_files))  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "get_settings"]
