from __future__ import annotations

from typing import Any

from .repository import NoSqlRepository


class NoSqlService:
    """Pass-through service; subclasses adjust payloads before they reach the repository."""

    def __init__(self, repo: NoSqlRepository):
        self.repo = repo

    async def pre_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def pre_update(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def list(self, db):
        return await self.repo.list(db)

    async def create(self, db, data: dict[str, Any]):
        data = await self.pre_create(data)
        return await self.repo.create(db, data)

    async def update(self, db, id_value: Any, data: dict[str, Any]):
        data = await self.pre_update(data)
        return await self.repo.update(db, id_value, data)

    async def delete(self, db, id_value: Any) -> bool:
        return await self.repo.delete(db, id_value)


TASKS_COLLECTION = "todos"


class TaskService(NoSqlService):
    # Clients only ever supply the description on create and the flag on update.
    async def pre_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return {"task": data.get("task"), "isCompleted": False}

    async def pre_update(self, data: dict[str, Any]) -> dict[str, Any]:
        if data.get("isCompleted") is None:
            return {}
        return {"isCompleted": data["isCompleted"]}


def get_task_service() -> TaskService:
    return TaskService(NoSqlRepository(collection_name=TASKS_COLLECTION))
