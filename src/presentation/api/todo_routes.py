"""Todo JSON endpoints."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from application.contracts.todo_dtos import CallerIdentity, CreateTodoRequest
from application.todo.errors import TodoStorageError, TodoTitleEmptyError
from composition_root.container import AppContainer
from presentation.auth_guard import api_identity

from .schemas import ErrorResponse, TodoCreateRequest, TodoResponse, serialize_todo

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def build_todo_router(container: AppContainer) -> APIRouter:
    """Create the list/create router bound to one container."""
    router = APIRouter(prefix="/api/todos", tags=["todos"])
    require_caller = api_identity(container.accounts)

    @router.get("", response_model=List[TodoResponse], responses=_ERROR_RESPONSES)
    def list_todos(caller: CallerIdentity = Depends(require_caller)) -> List[TodoResponse]:
        """List the caller's todos, newest first."""
        try:
            todos = container.list_todos_query.execute(caller)
        except TodoStorageError as exc:
            logger.exception("Error fetching todos: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc
        return [serialize_todo(todo) for todo in todos]

    @router.post("", response_model=TodoResponse, status_code=201, responses=_ERROR_RESPONSES)
    def create_todo(
        caller: CallerIdentity = Depends(require_caller),
        payload: Optional[TodoCreateRequest] = Body(None),
    ) -> TodoResponse:
        """Create a todo owned by the caller."""
        title = payload.title if payload is not None else None
        try:
            todo = container.create_todo_command.execute(caller, CreateTodoRequest(title=title or ""))
        except TodoTitleEmptyError as exc:
            raise HTTPException(status_code=400, detail="Title is required") from exc
        except TodoStorageError as exc:
            logger.exception("Error creating todo: %s", exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc
        return serialize_todo(todo)

    return router
