from __future__ import annotations

from application.todo.refresh import TODOS_PATH, ViewRefresher
from presentation.ui.pages.todos import bind_refresh


class FakeClient:
    def __init__(self) -> None:
        self.disconnect_handlers: list = []
        self.delete_handlers: list = []

    def on_disconnect(self, handler) -> None:
        self.disconnect_handlers.append(handler)

    def on_delete(self, handler) -> None:
        self.delete_handlers.append(handler)

    def disconnect(self) -> None:
        for handler in self.disconnect_handlers:
            handler()

    def delete(self) -> None:
        for handler in self.delete_handlers:
            handler()


def test_list_keeps_refreshing_after_a_reconnect() -> None:
    refresher = ViewRefresher()
    client = FakeClient()
    calls: list[int] = []
    bind_refresh(client, refresher, "alice", lambda: calls.append(1))

    client.disconnect()
    refresher.revalidate(TODOS_PATH, "alice")

    assert calls == [1]
    assert refresher.subscriber_count(TODOS_PATH, "alice") == 1


def test_deleted_client_is_unsubscribed() -> None:
    refresher = ViewRefresher()
    client = FakeClient()
    calls: list[int] = []
    bind_refresh(client, refresher, "alice", lambda: calls.append(1))

    client.delete()
    refresher.revalidate(TODOS_PATH, "alice")

    assert calls == []
    assert refresher.subscriber_count(TODOS_PATH, "alice") == 0
