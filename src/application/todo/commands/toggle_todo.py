from __future__ import annotations

import logging
from typing import Optional

from application.contracts.todo_dtos import CallerIdentity
from application.todo.errors import require_identity
from application.todo.refresh import TODOS_PATH, ViewRefresher
from domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class ToggleTodoCommand:
    def __init__(self, repository: TodoRepository, refresher: ViewRefresher) -> None:
        self._repository = repository
        self._refresher = refresher

    def execute(self, caller: Optional[CallerIdentity], todo_id: str) -> bool:
        """Flip ``completed``. Returns False when no owned record matched."""
        owner_id = require_identity(caller)
        matched = self._repository.toggle(todo_id, owner_id)
        if not matched:
            logger.debug("todo.toggle.no_match", extra={"owner_id": owner_id, "todo_id": todo_id})
            return False
        self._refresher.revalidate(TODOS_PATH, owner_id)
        return True
