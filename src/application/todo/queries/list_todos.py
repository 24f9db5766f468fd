from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import CallerIdentity, TodoItemDto
from application.todo.errors import require_identity
from domain.todo.repositories.todo_repository import TodoRepository


class ListTodosQuery:
    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def execute(self, caller: Optional[CallerIdentity]) -> list[TodoItemDto]:
        owner_id = require_identity(caller)
        return [TodoItemDto.from_entity(item) for item in self._repository.list_for_owner(owner_id)]
