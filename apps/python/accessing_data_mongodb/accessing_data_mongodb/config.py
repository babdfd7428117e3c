"""Settings for the accessing-data-mongodb demo application."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

# Search for the nearest .env so running from subdirectories still loads root config.
load_dotenv(find_dotenv(usecwd=True))

_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def _default_log_level() -> str:
    return os.getenv("LOG_LEVEL") or os.getenv("LOGURU_LEVEL") or "DEBUG"


class AppSettings(BaseModel):
    """Logging configuration for the demo run."""

    log_level: str = Field(default_factory=_default_log_level)

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level
