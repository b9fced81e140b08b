from collections import defaultdict
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from todo_api.api.fastapi.db.nosql.mongo.add import add_mongo_db, add_mongo_health
from todo_api.api.fastapi.middleware.errors import CatchAllExceptionMiddleware, register_error_handlers
from todo_api.api.fastapi.routers import register_all_routers
from todo_api.app.core.env import get_env
from todo_api.app.settings import AppSettings, get_app_settings
from todo_api.db.nosql.mongo.settings import MongoSettings

logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"
OPENAPI_URL = "/openapi.json"


def _gen_operation_id_factory():
    used: dict[str, int] = defaultdict(int)

    def _gen(route: APIRoute) -> str:
        base = route.name or getattr(route.endpoint, "__name__", "op")
        method = next(iter(route.methods or ["GET"])).lower()

        candidate = base
        if used[candidate]:
            candidate = f"{base}_{method}"
            if used[candidate]:
                candidate = f"{candidate}_{used[candidate] + 1}"

        used[candidate] += 1
        return candidate

    return _gen


def _add_cors(app: FastAPI, origins: list[str]) -> None:
    # Credentials cannot be combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app(
        app_settings: Optional[AppSettings] = None,
        mongo_settings: Optional[MongoSettings] = None,
        *,
        connect_mongo: bool = True,
) -> FastAPI:
    """
    Build the Todo List API application.

    Routes under ``todo_api.api.fastapi.routers`` are discovered automatically.
    With ``connect_mongo=False`` no client lifecycle is installed, which lets
    callers (tests, scripts) supply the database via dependency overrides.
    """
    settings = app_settings or get_app_settings()

    servers = None
    if settings.public_base_url:
        servers = [{"url": settings.public_base_url.rstrip("/"), "description": "Public server"}]

    app = FastAPI(
        title=settings.name,
        version=settings.version,
        description=settings.description,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=OPENAPI_URL,
        servers=servers,
        generate_unique_id_function=_gen_operation_id_factory(),
    )

    # Error handling
    app.add_middleware(CatchAllExceptionMiddleware)
    register_error_handlers(app)

    # CORS (outermost, so error responses carry the headers too)
    _add_cors(app, settings.cors_origins)

    register_all_routers(app, base_package="todo_api.api.fastapi.routers")

    if connect_mongo:
        add_mongo_db(app, settings=mongo_settings)
    add_mongo_health(app)

    logger.info(f"{settings.version} version of {settings.name} initialized [env: {get_env()}]")
    return app


__all__ = ["create_app", "DOCS_URL", "OPENAPI_URL"]
