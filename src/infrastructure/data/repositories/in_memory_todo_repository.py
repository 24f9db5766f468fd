from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, Iterable, Optional

from domain.todo.entities.todo import Todo
from domain.todo.repositories.todo_repository import TodoRepository
from infrastructure.data.models import utcnow


class InMemoryTodoRepository(TodoRepository):
    """Simple in-memory repository backed by a dict."""

    def __init__(
        self,
        initial_items: Optional[Iterable[Todo]] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._items: Dict[str, Todo] = {}
        self._clock = clock
        if initial_items:
            for item in initial_items:
                self._items[item.id] = item

    def add(self, title: str, owner_id: str) -> Todo:
        now = self._clock()
        todo = Todo(
            id=uuid.uuid4().hex,
            title=title,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self._items[todo.id] = todo
        return todo

    def get(self, todo_id: str, owner_id: str) -> Optional[Todo]:
        todo = self._items.get(todo_id)
        if todo is None or todo.owner_id != owner_id:
            return None
        return todo

    def list_for_owner(self, owner_id: str) -> list[Todo]:
        owned = [todo for todo in reversed(list(self._items.values())) if todo.owner_id == owner_id]
        return sorted(owned, key=lambda todo: todo.created_at, reverse=True)

    def toggle(self, todo_id: str, owner_id: str) -> bool:
        todo = self.get(todo_id, owner_id)
        if todo is None:
            return False
        self._items[todo_id] = replace(todo, completed=not todo.completed, updated_at=self._clock())
        return True

    def rename(self, todo_id: str, owner_id: str, title: str) -> bool:
        todo = self.get(todo_id, owner_id)
        if todo is None:
            return False
        self._items[todo_id] = replace(todo, title=title, updated_at=self._clock())
        return True

    def delete(self, todo_id: str, owner_id: str) -> bool:
        if self.get(todo_id, owner_id) is None:
            return False
        del self._items[todo_id]
        return True
