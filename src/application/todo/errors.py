from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import CallerIdentity
from domain.todo.exceptions.todo_exceptions import (
    TodoError,
    TodoStorageError,
    TodoTitleEmptyError,
)

__all__ = [
    "TodoError",
    "TodoStorageError",
    "TodoTitleEmptyError",
    "UnauthorizedError",
    "require_identity",
]


class UnauthorizedError(TodoError):
    pass


def require_identity(caller: Optional[CallerIdentity]) -> str:
    subject = (caller.subject if caller else "") or ""
    if not subject.strip():
        raise UnauthorizedError("User not authenticated")
    return subject
