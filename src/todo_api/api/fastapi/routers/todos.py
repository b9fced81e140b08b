from __future__ import annotations

from typing import Optional

from bson.errors import BSONError
from fastapi import APIRouter, Body, Depends, Path, status
from pymongo.errors import PyMongoError

from todo_api.api.fastapi.middleware.errors import BadRequestError, ServerError
from todo_api.db.nosql.mongo.client import get_mongo_db
from todo_api.db.nosql.service import TaskService, get_task_service
from todo_api.schemas.task import Message, TaskCreate, TaskRead, TaskUpdate

ROUTER_PREFIX = "/todos"
ROUTER_TAG = "Todos"

DELETED_MESSAGE = "deleted"

# Driver-side failures; anything else falls through to the catch-all (500).
STORAGE_ERRORS = (PyMongoError, BSONError)

router = APIRouter()


@router.get("", response_model=list[TaskRead], summary="List all tasks")
async def list_todos(
    db=Depends(get_mongo_db),
    service: TaskService = Depends(get_task_service),
):
    try:
        return await service.list(db)
    except STORAGE_ERRORS as exc:
        raise ServerError(str(exc)) from exc


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={400: {"model": Message}},
)
async def create_todo(
    payload: Optional[TaskCreate] = Body(default=None),
    db=Depends(get_mongo_db),
    service: TaskService = Depends(get_task_service),
):
    try:
        return await service.create(db, (payload or TaskCreate()).model_dump())
    except STORAGE_ERRORS as exc:
        raise BadRequestError(str(exc)) from exc


@router.put(
    "/{id}",
    response_model=Optional[TaskRead],
    summary="Update a task's completion status",
    description="Returns null when no task has the given id.",
    responses={400: {"model": Message}},
)
async def update_todo(
    payload: Optional[TaskUpdate] = Body(default=None),
    id: str = Path(..., description="Unique task id assigned by the store"),
    db=Depends(get_mongo_db),
    service: TaskService = Depends(get_task_service),
):
    try:
        return await service.update(db, id, (payload or TaskUpdate()).model_dump())
    except STORAGE_ERRORS as exc:
        raise BadRequestError(str(exc)) from exc


@router.delete(
    "/{id}",
    response_model=Message,
    summary="Delete a task",
    description="Always confirms, whether or not a task had the given id.",
    responses={500: {"model": Message}},
)
async def delete_todo(
    id: str = Path(..., description="Unique task id assigned by the store"),
    db=Depends(get_mongo_db),
    service: TaskService = Depends(get_task_service),
):
    try:
        await service.delete(db, id)
    except STORAGE_ERRORS as exc:
        raise ServerError(str(exc)) from exc
    return {"message": DELETED_MESSAGE}
