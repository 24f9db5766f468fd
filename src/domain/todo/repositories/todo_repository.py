from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from domain.todo.entities.todo import Todo


@runtime_checkable
class TodoRepository(Protocol):
    """Owner-scoped repository interface for Todo entities.

    Every lookup and mutation filters by ``owner_id`` together with the
    record id, so a record belonging to someone else behaves exactly like
    a record that does not exist.
    """

    def add(self, title: str, owner_id: str) -> Todo:
        ...

    def get(self, todo_id: str, owner_id: str) -> Optional[Todo]:
        ...

    def list_for_owner(self, owner_id: str) -> list[Todo]:
        """Return the owner's todos, newest first."""
        ...

    def toggle(self, todo_id: str, owner_id: str) -> bool:
        ...

    def rename(self, todo_id: str, owner_id: str, title: str) -> bool:
        ...

    def delete(self, todo_id: str, owner_id: str) -> bool:
        ...
