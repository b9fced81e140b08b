from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Response, status

from todo_api.db.nosql.health import mongo_healthcheck
from todo_api.db.nosql.mongo.client import dispose_mongo, get_mongo_db, initialize_mongo
from todo_api.db.nosql.mongo.settings import MongoSettings

logger = logging.getLogger(__name__)


def add_mongo_db(app: FastAPI, *, url: Optional[str] = None, settings: Optional[MongoSettings] = None) -> None:
    """
    Open the shared Mongo client on startup and close it on shutdown.

    An unreachable server is logged, not fatal: requests fail individually
    until the store comes back.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        db = await initialize_mongo(url, settings=settings)
        if await mongo_healthcheck(db):
            logger.info("Connected to MongoDB database '%s'", db.name)
        else:
            logger.error("Could not reach MongoDB database '%s'; continuing without a verified connection", db.name)
        try:
            yield
        finally:
            await dispose_mongo()

    app.router.lifespan_context = lifespan


def add_mongo_health(app: FastAPI, *, path: str = "/_mongo/health") -> None:
    router = APIRouter(tags=["internal"])

    @router.get(path, include_in_schema=False)
    async def mongo_health(db=Depends(get_mongo_db)):
        ok = await mongo_healthcheck(db)
        return Response(
            status_code=status.HTTP_200_OK if ok else status.HTTP_503_SERVICE_UNAVAILABLE
        )

    app.include_router(router)
