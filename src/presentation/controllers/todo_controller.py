from __future__ import annotations

from typing import Optional

from application.contracts.todo_dtos import CallerIdentity, CreateTodoRequest, UpdateTodoRequest
from composition_root.container import AppContainer
from presentation.ui.viewmodels.todo_viewmodel import todo_to_viewmodel, todos_to_viewmodels

TodoView = dict[str, str | bool]


def list_todos(container: AppContainer, caller: Optional[CallerIdentity]) -> list[TodoView]:
    return todos_to_viewmodels(container.list_todos_query.execute(caller))


def get_todo(container: AppContainer, caller: Optional[CallerIdentity], todo_id: str) -> Optional[TodoView]:
    todo = container.get_todo_query.execute(caller, todo_id)
    return todo_to_viewmodel(todo) if todo else None


def create_todo(container: AppContainer, caller: Optional[CallerIdentity], title: str) -> TodoView:
    todo = container.create_todo_command.execute(caller, CreateTodoRequest(title=title))
    return todo_to_viewmodel(todo)


def toggle_todo(container: AppContainer, caller: Optional[CallerIdentity], todo_id: str) -> bool:
    return container.toggle_todo_command.execute(caller, todo_id)


def update_todo(container: AppContainer, caller: Optional[CallerIdentity], todo_id: str, title: str) -> bool:
    return container.update_todo_command.execute(caller, UpdateTodoRequest(todo_id=todo_id, title=title))


def delete_todo(container: AppContainer, caller: Optional[CallerIdentity], todo_id: str) -> bool:
    return container.delete_todo_command.execute(caller, todo_id)
