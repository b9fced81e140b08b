from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    # Numbers are cast to text like the store's string typing; no emptiness or length checks
    model_config = ConfigDict(coerce_numbers_to_str=True)

    task: Optional[str] = Field(default=None, examples=["buy milk"])


class TaskUpdate(BaseModel):
    isCompleted: Optional[bool] = Field(default=None, examples=[True])


class TaskRead(BaseModel):
    # Stored documents may come from other writers: missing flag reads as false, null stays null
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str = Field(examples=["665f1c2e9b1e8a3d4c5b6a79"])
    task: Optional[str] = None
    isCompleted: Optional[bool] = False


class Message(BaseModel):
    message: str
