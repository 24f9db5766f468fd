from __future__ import annotations

import logging
from typing import Callable

from nicegui import ui

from application.todo.errors import TodoStorageError, TodoTitleEmptyError, UnauthorizedError
from application.todo.refresh import TODOS_PATH, RefreshCallback, ViewRefresher
from composition_root.container import AppContainer
from presentation.auth_guard import require_auth
from presentation.controllers import todo_controller
from presentation.ui.layout import page_layout
from presentation.ui.styles import (
    C_BTN_DANGER,
    C_BTN_PRIM,
    C_BTN_SEC,
    C_BTN_SUCCESS,
    C_BTN_WARNING,
    C_CARD,
    C_INPUT,
    C_PAGE_TITLE,
    C_TODO_ROW,
    C_TODO_TITLE,
    C_TODO_TITLE_DONE,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong. Please try again."


def bind_refresh(client, refresher: ViewRefresher, owner_id: str, callback: RefreshCallback) -> Callable[[], None]:
    """Subscribe the list until the client is deleted; reconnects keep the subscription."""
    unsubscribe = refresher.subscribe(TODOS_PATH, owner_id, callback)
    client.on_delete(unsubscribe)
    return unsubscribe


def register_todo_pages(container: AppContainer) -> None:
    @ui.page(TODOS_PATH)
    def todos_page() -> None:
        caller = require_auth(container.accounts)
        if caller is None:
            return

        def run_action(action) -> None:
            try:
                action()
            except UnauthorizedError:
                ui.navigate.to("/login")
            except TodoStorageError:
                logger.exception("todo.page_action_failed")
                ui.notify(GENERIC_FAILURE, color="red")

        with page_layout(caller):
            ui.label("Your Todos").classes(C_PAGE_TITLE)

            @ui.refreshable
            def todo_list() -> None:
                try:
                    todos = todo_controller.list_todos(container, caller)
                except TodoStorageError:
                    logger.exception("todo.page_list_failed")
                    ui.label(GENERIC_FAILURE).classes("text-sm text-rose-600")
                    return
                if not todos:
                    ui.label("No todos yet.").classes("text-sm text-slate-500")
                    return
                with ui.column().classes("w-full gap-2"):
                    for todo in todos:
                        todo_id = str(todo["id"])
                        with ui.row().classes(C_TODO_ROW):
                            ui.label(str(todo["title"])).classes(
                                C_TODO_TITLE_DONE if todo["completed"] else C_TODO_TITLE
                            ).tooltip(str(todo["created_label"]))
                            with ui.row().classes("gap-2"):
                                ui.button(
                                    str(todo["toggle_label"]),
                                    on_click=lambda t=todo_id: run_action(
                                        lambda: todo_controller.toggle_todo(container, caller, t)
                                    ),
                                ).props("no-caps").classes(C_BTN_WARNING if todo["completed"] else C_BTN_SUCCESS)
                                ui.button(
                                    "Delete",
                                    on_click=lambda t=todo_id: run_action(
                                        lambda: todo_controller.delete_todo(container, caller, t)
                                    ),
                                ).props("no-caps").classes(C_BTN_DANGER)
                                ui.button(
                                    "Edit",
                                    on_click=lambda href=str(todo["edit_href"]): ui.navigate.to(href),
                                ).props("no-caps").classes(C_BTN_SEC)

            with ui.card().classes(f"{C_CARD} p-4 w-full gap-3"):
                title_input = ui.input("Title", placeholder="Enter a new todo").classes(C_INPUT)

                def handle_add() -> None:
                    try:
                        todo_controller.create_todo(container, caller, title_input.value or "")
                    except TodoTitleEmptyError:
                        ui.notify("Please enter a title.", color="red")
                        return
                    except UnauthorizedError:
                        ui.navigate.to("/login")
                        return
                    except TodoStorageError:
                        logger.exception("todo.page_create_failed")
                        ui.notify(GENERIC_FAILURE, color="red")
                        return
                    title_input.value = ""

                title_input.on("keydown.enter", handle_add)
                ui.button("Add", on_click=handle_add).props("no-caps").classes(C_BTN_PRIM)

                ui.separator().classes("my-3")
                todo_list()

        bind_refresh(ui.context.client, container.refresher, caller.subject, todo_list.refresh)
