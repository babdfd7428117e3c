"""Configuration helpers for MongoDB connections used by db_core.

Applications can call ``db_core.configure`` at startup, before the first call
to ``get_db``, to override the defaults. If not overridden, the defaults below
are read from the environment.
"""
import os

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

_URI_SCHEMES = ("mongodb://", "mongodb+srv://")


class MongoSettings(BaseModel):
    """Basic MongoDB configuration that apps can extend if needed."""

    model_config = ConfigDict(validate_default=True, extra="forbid")

    uri: str = Field(
        default_factory=lambda: os.getenv("MONGO_URI", "mongodb://localhost:27017")
    )
    db_name: str = Field(default_factory=lambda: os.getenv("MONGO_DB_NAME", "test"))
    server_selection_timeout_ms: int = Field(
        default_factory=lambda: os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "30000"),
        gt=0,
    )

    @field_validator("uri")
    @classmethod
    def _check_scheme(cls, value: str) -> str:
        if not value.startswith(_URI_SCHEMES):
            raise ValueError(f"MongoDB URI must start with one of {_URI_SCHEMES}, got {value!r}")
        return value

    @field_validator("db_name")
    @classmethod
    def _check_db_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("MongoDB database name must not be empty")
        return value


def redact_uri(uri: str) -> str:
    """Hide the password part of ``user:pass@host`` URIs in log output."""

    scheme, _, rest = uri.partition("://")
    credentials, at, host = rest.rpartition("@")
    if not at or ":" not in credentials:
        return uri
    user = credentials.split(":", 1)[0]
    return f"{scheme}://{user}:***@{host}"


_settings: MongoSettings | None = None


def get_settings() -> MongoSettings:
    """Return the active settings, building them from the environment on first use."""

    global _settings
    if _settings is None:
        _settings = MongoSettings()
        logger.debug(
            "MongoSettings initialized with uri={uri} db_name={db_name}",
            uri=redact_uri(_settings.uri),
            db_name=_settings.db_name,
        )
    return _settings


def set_settings(new_settings: MongoSettings | None) -> None:
    """Swap the active settings; ``None`` means re-read the environment lazily."""

    global _settings
    _settings = new_settings
