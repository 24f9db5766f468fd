from __future__ import annotations

import logging
from typing import Optional

from application.contracts.todo_dtos import CallerIdentity, UpdateTodoRequest
from application.todo.errors import require_identity
from application.todo.refresh import TODOS_PATH, ViewRefresher
from domain.todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class UpdateTodoCommand:
    def __init__(self, repository: TodoRepository, refresher: ViewRefresher) -> None:
        self._repository = repository
        self._refresher = refresher

    def execute(self, caller: Optional[CallerIdentity], request: UpdateTodoRequest) -> bool:
        owner_id = require_identity(caller)
        title = (request.title or "").strip()
        if not title:
            # Blank edits are ignored, the stored title stays as it was.
            logger.debug("todo.update.empty_title", extra={"owner_id": owner_id, "todo_id": request.todo_id})
            return False
        matched = self._repository.rename(request.todo_id, owner_id, title)
        if not matched:
            logger.debug("todo.update.no_match", extra={"owner_id": owner_id, "todo_id": request.todo_id})
        self._refresher.revalidate(TODOS_PATH, owner_id)
        return matched
