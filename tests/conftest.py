"""
Root conftest.py for todo-api tests.

This file provides:
1. An in-memory stand-in for the Mongo database/collection used by the routes
2. App and client fixtures wired to that stand-in via dependency overrides
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError

from todo_api.api.fastapi import create_app
from todo_api.app.settings import AppSettings
from todo_api.db.nosql.mongo.client import get_mongo_db


# =============================================================================
# IN-MEMORY MONGO
# =============================================================================


def _matches(doc: Dict[str, Any], filter_: Dict[str, Any]) -> bool:
    return all(doc.get(k) == v for k, v in filter_.items())


class FakeInsertOneResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeDeleteResult:
    def __init__(self, deleted_count: int):
        self.deleted_count = deleted_count


class FakeCursor:
    """Supports the subset of the async cursor API the repository uses."""

    def __init__(self, docs: list):
        self._docs = docs

    async def to_list(self, length: Optional[int] = None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    """Dict-backed collection keeping insertion order, like Mongo's natural order."""

    def __init__(self, fail_with: Optional[Exception] = None):
        self._docs: Dict[ObjectId, Dict[str, Any]] = {}
        self._fail_with = fail_with

    def _check(self):
        if self._fail_with is not None:
            raise self._fail_with

    async def insert_one(self, doc: Dict[str, Any]):
        self._check()
        doc.setdefault("_id", ObjectId())
        self._docs[doc["_id"]] = copy.deepcopy(doc)
        return FakeInsertOneResult(doc["_id"])

    def find(self, filter_: Optional[Dict[str, Any]] = None):
        self._check()
        filter_ = filter_ or {}
        return FakeCursor([copy.deepcopy(d) for d in self._docs.values() if _matches(d, filter_)])

    async def find_one(self, filter_: Dict[str, Any]):
        self._check()
        for d in self._docs.values():
            if _matches(d, filter_):
                return copy.deepcopy(d)
        return None

    async def find_one_and_update(self, filter_, update, return_document=ReturnDocument.BEFORE):
        self._check()
        for d in self._docs.values():
            if _matches(d, filter_):
                before = copy.deepcopy(d)
                d.update(update.get("$set", {}))
                return copy.deepcopy(d) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, filter_: Dict[str, Any]):
        self._check()
        for oid, d in list(self._docs.items()):
            if _matches(d, filter_):
                del self._docs[oid]
                return FakeDeleteResult(1)
        return FakeDeleteResult(0)

    def __len__(self):
        return len(self._docs)


class FakeDatabase:
    def __init__(self, name: str = "todo-db", fail_with: Optional[Exception] = None):
        self.name = name
        self._fail_with = fail_with
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(fail_with=self._fail_with)
        return self._collections[name]

    async def command(self, name: str):
        if self._fail_with is not None:
            raise self._fail_with
        return {"ok": 1}


# =============================================================================
# APP FIXTURES
# =============================================================================


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def broken_db() -> FakeDatabase:
    """A database whose every operation fails like an unreachable server."""
    return FakeDatabase(fail_with=ServerSelectionTimeoutError("localhost:27017: connection refused"))


def build_app(db, **settings: Any) -> FastAPI:
    app = create_app(AppSettings(**settings), connect_mongo=False)
    app.dependency_overrides[get_mongo_db] = lambda: db
    return app


@pytest.fixture
def make_app():
    """Factory fixture: ``make_app(db, **app_settings)``."""
    return build_app


@pytest.fixture
def app(fake_db) -> FastAPI:
    return build_app(fake_db)


@pytest.fixture
def client(app: FastAPI):
    # raise_server_exceptions=False so the catch-all middleware response is observable
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def broken_client(broken_db):
    with TestClient(build_app(broken_db), raise_server_exceptions=False) as c:
        yield c
