from __future__ import annotations

import pytest

from application.contracts.todo_dtos import CreateTodoRequest, UpdateTodoRequest
from application.todo.errors import UnauthorizedError


def _create(container, caller, title: str = "Rechnung senden"):
    return container.create_todo_command.execute(caller, CreateTodoRequest(title=title))


def _only(container, caller):
    (item,) = container.list_todos_query.execute(caller)
    return item


def test_toggle_twice_restores_completed(container, alice) -> None:
    todo = _create(container, alice)

    assert container.toggle_todo_command.execute(alice, todo.id) is True
    assert _only(container, alice).completed is True
    assert container.toggle_todo_command.execute(alice, todo.id) is True
    assert _only(container, alice).completed is False


def test_toggle_refreshes_updated_at_but_not_created_at(container, alice) -> None:
    todo = _create(container, alice)

    container.toggle_todo_command.execute(alice, todo.id)

    stored = _only(container, alice)
    assert stored.created_at == todo.created_at
    assert stored.updated_at > todo.updated_at


def test_toggle_unknown_id_is_noop(container, alice) -> None:
    assert container.toggle_todo_command.execute(alice, "missing") is False


def test_update_sets_trimmed_title(container, alice) -> None:
    todo = _create(container, alice)

    changed = container.update_todo_command.execute(
        alice, UpdateTodoRequest(todo_id=todo.id, title="  Follow-up  ")
    )

    assert changed is True
    assert _only(container, alice).title == "Follow-up"


@pytest.mark.parametrize("title", ["", "   "])
def test_update_with_empty_title_keeps_stored_title(container, alice, title) -> None:
    todo = _create(container, alice, "Einkaufen")
    calls: list[int] = []
    container.refresher.subscribe("/dashboard/todos", alice.subject, lambda: calls.append(1))

    changed = container.update_todo_command.execute(alice, UpdateTodoRequest(todo_id=todo.id, title=title))

    assert changed is False
    assert _only(container, alice).title == "Einkaufen"
    assert calls == []


def test_delete_removes_record(container, alice) -> None:
    todo = _create(container, alice)

    assert container.delete_todo_command.execute(alice, todo.id) is True
    assert container.list_todos_query.execute(alice) == []


def test_delete_missing_id_is_noop(container, alice) -> None:
    _create(container, alice)

    assert container.delete_todo_command.execute(alice, "missing") is False
    assert len(container.list_todos_query.execute(alice)) == 1


def test_foreign_owner_cannot_touch_record(container, alice, bob) -> None:
    todo = _create(container, alice, "Buy milk")

    assert container.toggle_todo_command.execute(bob, todo.id) is False
    assert container.update_todo_command.execute(bob, UpdateTodoRequest(todo_id=todo.id, title="Hacked")) is False
    assert container.delete_todo_command.execute(bob, todo.id) is False

    stored = _only(container, alice)
    assert stored.title == "Buy milk"
    assert stored.completed is False


@pytest.mark.parametrize(
    "run",
    [
        lambda c: c.toggle_todo_command.execute(None, "x"),
        lambda c: c.update_todo_command.execute(None, UpdateTodoRequest(todo_id="x", title="t")),
        lambda c: c.delete_todo_command.execute(None, "x"),
        lambda c: c.get_todo_query.execute(None, "x"),
    ],
)
def test_mutations_require_identity(container, run) -> None:
    with pytest.raises(UnauthorizedError):
        run(container)
