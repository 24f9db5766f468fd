from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from domain.todo.exceptions.todo_exceptions import TodoTitleEmptyError


@dataclass(frozen=True)
class Todo:
    id: str
    title: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    completed: bool = False

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise TodoTitleEmptyError("Todo title must not be empty.")
