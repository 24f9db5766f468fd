from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional

from sqlalchemy import delete, not_, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from domain.todo.entities.todo import Todo
from domain.todo.exceptions.todo_exceptions import TodoStorageError
from domain.todo.repositories.todo_repository import TodoRepository
from infrastructure.data.connection import ConnectionProvider
from infrastructure.data.models import TodoRecord, utcnow


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is written in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_entity(record: TodoRecord) -> Todo:
    return Todo(
        id=record.id,
        title=record.title,
        owner_id=record.owner_id,
        completed=record.completed,
        created_at=_as_utc(record.created_at),
        updated_at=_as_utc(record.updated_at),
    )


class SqlTodoRepository(TodoRepository):
    """Todo repository on the shared SQLModel engine.

    Each method runs exactly one statement scoped by ``(id, owner_id)`` (or
    ``owner_id`` alone for listing). Toggle is a single atomic
    ``UPDATE ... SET completed = NOT completed`` so concurrent toggles by the
    same owner cannot lose an update.
    """

    def __init__(self, connections: ConnectionProvider, clock: Callable[[], datetime] = utcnow) -> None:
        self._connections = connections
        self._clock = clock

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        try:
            with self._connections.session() as session:
                yield session
        except SQLAlchemyError as exc:
            raise TodoStorageError(f"Failed to {operation} todo") from exc

    def _owned(self, todo_id: str, owner_id: str):
        return col(TodoRecord.id) == todo_id, col(TodoRecord.owner_id) == owner_id

    def add(self, title: str, owner_id: str) -> Todo:
        now = self._clock()
        with self._session("create") as session:
            record = TodoRecord(title=title, owner_id=owner_id, created_at=now, updated_at=now)
            session.add(record)
            session.commit()
            session.refresh(record)
            return _to_entity(record)

    def get(self, todo_id: str, owner_id: str) -> Optional[Todo]:
        with self._session("load") as session:
            record = session.exec(select(TodoRecord).where(*self._owned(todo_id, owner_id))).first()
            return _to_entity(record) if record else None

    def list_for_owner(self, owner_id: str) -> list[Todo]:
        statement = (
            select(TodoRecord)
            .where(col(TodoRecord.owner_id) == owner_id)
            .order_by(col(TodoRecord.created_at).desc())
        )
        with self._session("list") as session:
            return [_to_entity(record) for record in session.exec(statement).all()]

    def toggle(self, todo_id: str, owner_id: str) -> bool:
        statement = (
            update(TodoRecord)
            .where(*self._owned(todo_id, owner_id))
            .values(completed=not_(col(TodoRecord.completed)), updated_at=self._clock())
        )
        with self._session("toggle") as session:
            result = session.exec(statement)
            session.commit()
            return result.rowcount > 0

    def rename(self, todo_id: str, owner_id: str, title: str) -> bool:
        statement = (
            update(TodoRecord)
            .where(*self._owned(todo_id, owner_id))
            .values(title=title, updated_at=self._clock())
        )
        with self._session("update") as session:
            result = session.exec(statement)
            session.commit()
            return result.rowcount > 0

    def delete(self, todo_id: str, owner_id: str) -> bool:
        statement = delete(TodoRecord).where(*self._owned(todo_id, owner_id))
        with self._session("delete") as session:
            result = session.exec(statement)
            session.commit()
            return result.rowcount > 0
