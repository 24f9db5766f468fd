"""Pydantic request/response models for the todo JSON API."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from application.contracts.todo_dtos import TodoItemDto


class TodoCreateRequest(BaseModel):
    # Optional so a missing title maps to 400, not a validation 422.
    title: Optional[str] = None


class TodoResponse(BaseModel):
    id: str
    title: str
    completed: bool
    owner_id: str
    created_at: datetime
    updated_at: datetime


class ErrorResponse(BaseModel):
    detail: str


def serialize_todo(item: TodoItemDto) -> TodoResponse:
    """Convert an application TodoItemDto to the API response."""
    return TodoResponse(
        id=item.id,
        title=item.title,
        completed=item.completed,
        owner_id=item.owner_id,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )
