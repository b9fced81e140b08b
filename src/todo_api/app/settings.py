from functools import lru_cache
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    # flat = easy env overrides
    name: str = "Todo List API"
    version: str = "1.0.0"
    description: str = "API for managing a to-do list"

    host: str = "0.0.0.0"
    port: int = 3000

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])
    # Advertised in the OpenAPI "servers" list when set
    public_base_url: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="APP_",            # APP_NAME, APP_PORT, ...
        env_file=".env",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, v):
        # APP_CORS_ORIGINS="https://a.example, https://b.example"
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


@lru_cache
def get_app_settings(**kwargs) -> AppSettings:
    # Only include kwargs that are not None, so defaults in AppSettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return AppSettings(**filtered_kwargs)
