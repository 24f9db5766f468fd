from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from application.contracts.todo_dtos import TodoItemDto


def format_timestamp(value: datetime) -> str:
    return value.astimezone().strftime("%d.%m.%Y %H:%M")


def todo_to_viewmodel(todo: TodoItemDto) -> dict[str, str | bool]:
    return {
        "id": todo.id,
        "title": todo.title,
        "completed": todo.completed,
        "toggle_label": "Undo" if todo.completed else "Done",
        "created_label": format_timestamp(todo.created_at),
        "edit_href": f"/dashboard/todos/{todo.id}",
    }


def todos_to_viewmodels(todos: Iterable[TodoItemDto]) -> list[dict[str, str | bool]]:
    return [todo_to_viewmodel(todo) for todo in todos]
