from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache


class Env(StrEnum):
    LOCAL = "local"
    DEV   = "dev"
    TEST  = "test"
    PROD  = "prod"


# Aliases accepted in APP_ENV besides the canonical values
SYNONYMS: dict[str, Env] = {
    "development": Env.DEV,
    "testing": Env.TEST,
    "production": Env.PROD,
}


def normalize_env(raw: str | None) -> Env | None:
    val = (raw or "").strip().lower()
    if not val:
        return None
    try:
        return Env(val)
    except ValueError:
        return SYNONYMS.get(val)


@cache
def get_env() -> Env:
    """Environment from APP_ENV, resolved once; unknown values warn and mean LOCAL."""
    raw = os.getenv("APP_ENV")
    env = normalize_env(raw)
    if env is not None:
        return env
    if raw:
        warnings.warn(
            f"Unrecognized environment '{raw}', defaulting to 'local'.",
            RuntimeWarning,
            stacklevel=2,
        )
    return Env.LOCAL


def pick(*, prod, nonprod, dev=None, test=None, local=None, env: Env | None = None):
    """
    Choose a value based on the active environment.

    Example:
        log_format = pick(prod="json", nonprod="plain")
    """
    e = env or get_env()
    specific = {Env.PROD: prod, Env.DEV: dev, Env.TEST: test, Env.LOCAL: local}[e]
    return specific if specific is not None else nonprod
