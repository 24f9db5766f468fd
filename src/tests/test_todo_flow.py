from __future__ import annotations

from application.contracts.todo_dtos import CreateTodoRequest
from composition_root import create_app_container
from infrastructure.config.settings import Settings
from presentation.controllers import todo_controller


def test_todo_flow_alice_and_bob(container, alice, bob) -> None:
    created = container.create_todo_command.execute(alice, CreateTodoRequest(title="Buy milk"))

    listed = container.list_todos_query.execute(alice)
    assert [(item.title, item.completed) for item in listed] == [("Buy milk", False)]

    container.toggle_todo_command.execute(alice, created.id)
    assert container.list_todos_query.execute(alice)[0].completed is True

    assert container.list_todos_query.execute(bob) == []

    container.delete_todo_command.execute(alice, created.id)
    assert container.list_todos_query.execute(alice) == []


def test_todo_flow_via_controller(tmp_path, alice) -> None:
    settings = Settings(database_url=f"sqlite:///{tmp_path}/flow.db", storage_secret="test")
    app_container = create_app_container(settings)
    try:
        todo_controller.create_todo(app_container, alice, "Finish onboarding")
        second = todo_controller.create_todo(app_container, alice, "Review invoice")
        todo_controller.toggle_todo(app_container, alice, str(second["id"]))

        todos = {todo["title"]: todo for todo in todo_controller.list_todos(app_container, alice)}

        assert set(todos) == {"Review invoice", "Finish onboarding"}
        assert todos["Review invoice"]["toggle_label"] == "Undo"
        assert todos["Finish onboarding"]["toggle_label"] == "Done"
        assert todos["Review invoice"]["edit_href"] == f"/dashboard/todos/{second['id']}"

        todo_controller.update_todo(app_container, alice, str(second["id"]), "Send invoice")
        assert todo_controller.get_todo(app_container, alice, str(second["id"]))["title"] == "Send invoice"
    finally:
        app_container.connections.dispose()
