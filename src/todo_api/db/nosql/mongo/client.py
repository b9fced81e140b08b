from __future__ import annotations

import logging
from typing import Any, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from .settings import MongoSettings, get_mongo_settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncMongoClient] = None
_db: Optional[AsyncDatabase] = None


async def initialize_mongo(url: Optional[str] = None, *, settings: Optional[MongoSettings] = None) -> AsyncDatabase:
    """
    Create the process-wide client and select the database.

    Idempotent: a second call returns the already selected database.
    The driver connects lazily, so an unreachable server does not fail here.
    """
    global _client, _db
    if _db is not None:
        return _db

    settings = settings or get_mongo_settings(url=url)
    kwargs: dict[str, Any] = {
        "serverSelectionTimeoutMS": settings.server_selection_timeout_ms,
        "connectTimeoutMS": settings.connect_timeout_ms,
    }
    _client = AsyncMongoClient(settings.url, **kwargs)
    _db = _client[settings.resolved_db_name]
    logger.debug("Mongo client created for database '%s'", _db.name)
    return _db


async def dispose_mongo() -> None:
    global _client, _db
    if _client is not None:
        await _client.close()
        logger.debug("Mongo client closed")
    _client = None
    _db = None


def get_mongo_db() -> AsyncDatabase:
    """FastAPI dependency returning the shared database handle."""
    if _db is None:
        raise RuntimeError("Mongo is not initialized; call initialize_mongo() first")
    return _db
