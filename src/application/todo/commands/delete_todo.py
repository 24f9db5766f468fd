from __future__ import annotations

import logging
from typing import Optional

from application.contracts.todo_dtos import CallerIdentity
from application.todo.errors import require_identity
from application.todo.refresh import TODOS_PATH, ViewRefresher
from domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class DeleteTodoCommand:
    def __init__(self, repository: TodoRepository, refresher: ViewRefresher) -> None:
        self._repository = repository
        self._refresher = refresher

    def execute(self, caller: Optional[CallerIdentity], todo_id: str) -> bool:
        owner_id = require_identity(caller)
        deleted = self._repository.delete(todo_id, owner_id)
        if deleted:
            logger.info("todo.delete", extra={"owner_id": owner_id, "todo_id": todo_id})
        else:
            logger.debug("todo.delete.no_match", extra={"owner_id": owner_id, "todo_id": todo_id})
        self._refresher.revalidate(TODOS_PATH, owner_id)
        return deleted
