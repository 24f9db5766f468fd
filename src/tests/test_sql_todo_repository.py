from __future__ import annotations

from datetime import timezone

import pytest
from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from domain.todo.exceptions.todo_exceptions import TodoStorageError
from infrastructure.data.connection import ConnectionProvider
from infrastructure.data.models import TodoRecord
from infrastructure.data.repositories.sql_todo_repository import SqlTodoRepository


def test_add_generates_opaque_id_and_utc_timestamps(sql_todo_repo) -> None:
    todo = sql_todo_repo.add("Einkaufen", "owner-1")

    assert len(todo.id) == 32
    assert todo.created_at.tzinfo == timezone.utc
    assert sql_todo_repo.get(todo.id, "owner-1") == todo


def test_toggle_is_a_single_atomic_update(sql_todo_repo, connections) -> None:
    todo = sql_todo_repo.add("Einkaufen", "owner-1")
    engine = connections.get_connection()
    statements: list[str] = []

    def capture(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", capture)
    try:
        assert sql_todo_repo.toggle(todo.id, "owner-1") is True
    finally:
        event.remove(engine, "before_cursor_execute", capture)

    assert len(statements) == 1
    assert statements[0].startswith("UPDATE todos SET completed=")
    assert "todos.owner_id" in statements[0]
    assert sql_todo_repo.get(todo.id, "owner-1").completed is True


def test_owner_filter_applies_to_every_mutation(sql_todo_repo) -> None:
    todo = sql_todo_repo.add("Einkaufen", "owner-1")

    assert sql_todo_repo.toggle(todo.id, "owner-2") is False
    assert sql_todo_repo.rename(todo.id, "owner-2", "x") is False
    assert sql_todo_repo.delete(todo.id, "owner-2") is False
    assert sql_todo_repo.get(todo.id, "owner-2") is None
    assert sql_todo_repo.list_for_owner("owner-2") == []
    assert sql_todo_repo.get(todo.id, "owner-1").title == "Einkaufen"


def test_records_persist_across_providers(tmp_path, clock) -> None:
    url = f"sqlite:///{tmp_path}/persist.db"
    first = ConnectionProvider(url)
    todo = SqlTodoRepository(first, clock=clock).add("Bleibt", "owner-1")
    first.dispose()

    second = ConnectionProvider(url)
    try:
        assert SqlTodoRepository(second).get(todo.id, "owner-1").title == "Bleibt"
    finally:
        second.dispose()


def test_store_failure_is_wrapped(sql_todo_repo, connections) -> None:
    with connections.get_connection().begin() as conn:
        conn.exec_driver_sql(f"DROP TABLE {TodoRecord.__tablename__}")

    with pytest.raises(TodoStorageError) as excinfo:
        sql_todo_repo.list_for_owner("owner-1")

    assert isinstance(excinfo.value.__cause__, OperationalError)
