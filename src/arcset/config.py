from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    """Runtime settings read from ARCSET_* environment variables (or .env)."""

    model_config = SettingsConfigDict(
        env_prefix="ARCSET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    runs_dir: Path = Field(default_factory=lambda: Path.cwd() / "runs")
    log_level: str = "WARNING"
    default_heuristic: str = "greedy"
    strict_metis: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for CLI use. Library modules only log."""
    name = (level or get_settings().log_level).strip().upper()
    if name not in _LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(level=getattr(logging, name), format=_LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, name))
