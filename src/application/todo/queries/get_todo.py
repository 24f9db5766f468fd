from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import CallerIdentity, TodoItemDto
from application.todo.errors import require_identity
from domain.todo.repositories.todo_repository import TodoRepository


class GetTodoQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, caller: Optional[CallerIdentity], todo_id: str) -> Optional[TodoItemDto]:
        owner_id = require_identity(caller)
        item = self._repository.get(todo_id, owner_id)
        return TodoItemDto.from_entity(item) if item else None
