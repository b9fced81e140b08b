from __future__ import annotations

from functools import lru_cache
from typing import Optional
from urllib.parse import unquote, urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MONGO_URL = "mongodb://localhost:27017/todo-db"
DEFAULT_MONGO_DB = "todo-db"


class MongoSettings(BaseSettings):
    """
    MongoDB settings.

    Env support:
      MONGO_URL, MONGO_DB, MONGO_SERVER_SELECTION_TIMEOUT_MS, MONGO_CONNECT_TIMEOUT_MS

    The database name is taken from the URL path when present
    (mongodb://host:27017/<db>), otherwise from MONGO_DB.
    """

    url: str = Field(default=DEFAULT_MONGO_URL)
    db: Optional[str] = Field(default=None)
    server_selection_timeout_ms: int = Field(default=5000)
    connect_timeout_ms: int = Field(default=20000)

    model_config = SettingsConfigDict(
        env_prefix="MONGO_",     # MONGO_URL, MONGO_DB, ...
        env_file=".env",
        extra="ignore",
    )

    @property
    def resolved_db_name(self) -> str:
        if not self.url.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"Invalid MONGO_URL '{self.url}': expected a mongodb:// or mongodb+srv:// URL")
        from_url = unquote(urlsplit(self.url).path.lstrip("/"))
        return from_url or self.db or DEFAULT_MONGO_DB


@lru_cache
def get_mongo_settings(**kwargs) -> MongoSettings:
    # Only include kwargs that are not None, so defaults in MongoSettings are used
    filtered = {k: v for k, v in kwargs.items() if v is not None}
    return MongoSettings(**filtered)
