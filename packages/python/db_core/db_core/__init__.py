"""Minimal MongoDB helpers shared across domain repositories.

Example usage in a domain repository:

    from db_core import get_db

    async def list_customers():
        db = get_db()
        cursor = db["customer"].find({"lastName": "Smith"})
        return await cursor.to_list(length=100)
"""

from .settings import MongoSettings, get_settings, set_settings
from .mongo import close_mongo_client, configure, get_mongo_client, get_db, ping
from .typing import MongoDocument

__all__ = [
    "MongoSettings",
    "MongoDocument",
    "get_settings",
    "set_settings",
    "configure",
    "get_mongo_client",
    "get_db",
    "ping",
    "close_mongo_client",
]
