from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from domain.todo.entities.todo import Todo


@dataclass(frozen=True)
class CallerIdentity:
    """Subject id established by the identity provider for the current request."""

    subject: str


@dataclass(frozen=True)
class CreateTodoRequest:
    title: str


@dataclass(frozen=True)
class UpdateTodoRequest:
    todo_id: str
    title: str


@dataclass(frozen=True)
class TodoItemDto:
    id: str
    title: str
    completed: bool
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoItemDto":
        return cls(
            id=todo.id,
            title=todo.title,
            completed=todo.completed,
            owner_id=todo.owner_id,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )
