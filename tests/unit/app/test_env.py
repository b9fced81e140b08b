from __future__ import annotations

import pytest

from todo_api.app.core import env as env_mod
from todo_api.app.core.env import Env, normalize_env, pick


@pytest.fixture(autouse=True)
def _fresh_env_cache():
    env_mod.get_env.cache_clear()
    yield
    env_mod.get_env.cache_clear()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("prod", Env.PROD),
        (" Production ", Env.PROD),
        ("development", Env.DEV),
        ("testing", Env.TEST),
        ("local", Env.LOCAL),
        ("staging", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_env(raw, expected):
    assert normalize_env(raw) == expected


def test_get_env_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert env_mod.get_env() is Env.PROD


def test_get_env_warns_on_unknown(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")
    with pytest.warns(RuntimeWarning, match="staging"):
        assert env_mod.get_env() is Env.LOCAL


def test_get_env_defaults_to_local(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert env_mod.get_env() is Env.LOCAL


def test_pick_prefers_specific_then_nonprod():
    assert pick(prod="p", nonprod="n", env=Env.PROD) == "p"
    assert pick(prod="p", nonprod="n", dev="d", env=Env.DEV) == "d"
    assert pick(prod="p", nonprod="n", env=Env.DEV) == "n"
    assert pick(prod="p", nonprod="n", local="l", env=Env.LOCAL) == "l"
