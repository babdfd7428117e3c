"""Async MongoDB helpers built on top of Motor.

Only generic utilities live here; domain repositories import these helpers and
build their own repositories and schemas on top."""

from functools import lru_cache
from typing import Any

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from .settings import MongoSettings, get_settings, redact_uri, set_settings


@lru_cache
def get_mongo_client() -> AsyncIOMotorClient:
    """Return a cached Motor client configured via ``db_core.get_settings``."""

    settings = get_settings()
    logger.debug("Creating Motor client for {uri}", uri=redact_uri(settings.uri))
    return AsyncIOMotorClient(
        settings.uri,
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )


def get_db() -> AsyncIOMotorDatabase:
    """Return the main application database defined by ``settings.db_name``."""

    client = get_mongo_client()
    return client[get_settings().db_name]


async def ping() -> dict[str, Any]:
    """Run a simple ``ping`` command against the configured MongoDB server.

    Raises the driver's ``ServerSelectionTimeoutError`` when the server cannot
    be reached.
    """

    db = get_db()
    await db.command("ping")
    return {"ok": True}


def close_mongo_client() -> None:
    """Close the cached client (if one was created) and forget it."""

    if get_mongo_client.cache_info().currsize:
        get_mongo_client().close()
        logger.debug("Motor client closed")
    get_mongo_client.cache_clear()


def configure(**overrides: Any) -> MongoSettings:
    """Replace the active settings, dropping any client built from the old ones.

    ``None`` values are ignored so CLI flags can be passed straight through.
    Unknown keys and invalid values raise ``pydantic.ValidationError``.
    """

    current = get_settings().model_dump()
    current.update({key: value for key, value in overrides.items() if value is not None})
    new_settings = MongoSettings.model_validate(current)
    close_mongo_client()
    set_settings(new_settings)
    logger.debug(
        "MongoSettings reconfigured with uri={uri} db_name={db_name}",
        uri=redact_uri(new_settings.uri),
        db_name=new_settings.db_name,
    )
    return new_settings
