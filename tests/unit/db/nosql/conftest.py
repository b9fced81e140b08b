"""
NoSQL repository/service test fixtures.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from bson import ObjectId


@pytest.fixture
def task_id() -> ObjectId:
    return ObjectId("665f1c2e9b1e8a3d4c5b6a79")


@pytest.fixture
def mock_cursor():
    """Create a mock async cursor."""
    cursor = Mock()
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def mock_mongo_collection(mock_cursor):
    """Create a mock MongoDB collection for testing."""
    collection = Mock()
    collection.insert_one = AsyncMock()
    collection.find = Mock(return_value=mock_cursor)
    collection.find_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def mock_db(mock_mongo_collection):
    """Create a mock database whose ``db[name]`` is the mock collection."""
    db = MagicMock()
    db.__getitem__.return_value = mock_mongo_collection
    return db


@pytest.fixture
def sample_task_document(task_id):
    return {"_id": task_id, "task": "buy milk", "isCompleted": False}
