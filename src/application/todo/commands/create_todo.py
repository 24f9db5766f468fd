from __future__ import annotations

import logging
from typing import Optional

from application.contracts.todo_dtos import CallerIdentity, CreateTodoRequest, TodoItemDto
from application.todo.errors import TodoTitleEmptyError, require_identity
from application.todo.refresh import TODOS_PATH, ViewRefresher
from domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class CreateTodoCommand:
    def __init__(self, repository: TodoRepository, refresher: ViewRefresher) -> None:
        self._repository = repository
        self._refresher = refresher

    def execute(self, caller: Optional[CallerIdentity], request: CreateTodoRequest) -> TodoItemDto:
        owner_id = require_identity(caller)
        title = (request.title or "").strip()
        if not title:
            raise TodoTitleEmptyError("Title is required")
        item = self._repository.add(title, owner_id)
        logger.info("todo.create", extra={"owner_id": owner_id, "todo_id": item.id})
        self._refresher.revalidate(TODOS_PATH, owner_id)
        return TodoItemDto.from_entity(item)
