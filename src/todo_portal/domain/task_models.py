from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class TaskCreate(BaseModel):
    # null and absent both mean "no title"; the route answers 400 for either.
    title: Optional[str] = None


class Task(BaseModel):
    id: int
    title: str
    completed: bool = False


class TaskCreated(BaseModel):
    success: bool = True
    task: Task


class TaskResult(BaseModel):
    success: bool
