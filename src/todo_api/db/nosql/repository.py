from __future__ import annotations

import logging
from typing import Any, Optional

from bson import ObjectId
from pymongo import ReturnDocument

logger = logging.getLogger(__name__)


def to_object_id(id_value: Any) -> ObjectId:
    """Parse an API identifier; raises bson.errors.InvalidId when malformed."""
    if isinstance(id_value, ObjectId):
        return id_value
    return ObjectId(str(id_value))


def doc_to_api(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Render a stored document for the API: ``_id`` -> string ``id``."""
    if doc is None:
        return None
    out = dict(doc)
    if "_id" in out:
        out["id"] = str(out.pop("_id"))
    return out


class NoSqlRepository:
    """
    Thin async repository over a single Mongo collection.

    Every method takes the database handle first so the same repository can
    be shared across requests; documents come back with ``id`` in place of
    ``_id``.
    """

    def __init__(self, *, collection_name: str):
        self.collection_name = collection_name

    def _col(self, db):
        return db[self.collection_name]

    async def list(self, db) -> list[dict[str, Any]]:
        # storage natural order, no paging
        docs = await self._col(db).find({}).to_list(length=None)
        return [doc_to_api(d) for d in docs]

    async def get(self, db, id_value: Any) -> Optional[dict[str, Any]]:
        doc = await self._col(db).find_one({"_id": to_object_id(id_value)})
        return doc_to_api(doc)

    async def create(self, db, data: dict[str, Any]) -> dict[str, Any]:
        doc = dict(data)
        res = await self._col(db).insert_one(doc)
        doc["_id"] = res.inserted_id
        logger.debug("Inserted %s into %s", res.inserted_id, self.collection_name)
        return doc_to_api(doc)

    async def update(self, db, id_value: Any, data: dict[str, Any]) -> Optional[dict[str, Any]]:
        oid = to_object_id(id_value)
        if not data:
            return await self.get(db, oid)
        doc = await self._col(db).find_one_and_update(
            {"_id": oid},
            {"$set": data},
            return_document=ReturnDocument.AFTER,
        )
        return doc_to_api(doc)

    async def delete(self, db, id_value: Any) -> bool:
        res = await self._col(db).delete_one({"_id": to_object_id(id_value)})
        return res.deleted_count > 0
