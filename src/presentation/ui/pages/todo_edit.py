from __future__ import annotations

import logging

from fastapi.responses import RedirectResponse
from nicegui import ui

from application.todo.errors import TodoStorageError, UnauthorizedError
from application.todo.refresh import TODOS_PATH
from composition_root.container import AppContainer
from presentation.auth_guard import require_auth
from presentation.controllers import todo_controller
from presentation.ui.layout import page_layout
from presentation.ui.styles import C_BTN_PRIM, C_BTN_SEC, C_CARD, C_INPUT, C_PAGE_TITLE

logger = logging.getLogger(__name__)


def register_todo_edit_page(container: AppContainer) -> None:
    @ui.page(TODOS_PATH + "/{todo_id}")
    def edit_todo_page(todo_id: str):
        caller = require_auth(container.accounts)
        if caller is None:
            return None

        todo = todo_controller.get_todo(container, caller, todo_id)
        if todo is None:
            # Missing and foreign records look the same: back to the list.
            return RedirectResponse(TODOS_PATH)

        with page_layout(caller):
            with ui.card().classes(f"{C_CARD} p-6 w-full gap-4"):
                ui.label("Edit Todo").classes(C_PAGE_TITLE)
                title_input = ui.input("Todo Title", value=str(todo["title"])).props("outlined").classes(C_INPUT)

                def handle_save() -> None:
                    try:
                        todo_controller.update_todo(container, caller, todo_id, title_input.value or "")
                    except UnauthorizedError:
                        ui.navigate.to("/login")
                        return
                    except TodoStorageError:
                        logger.exception("todo.page_update_failed")
                        ui.notify("Saving failed. Please try again.", color="red")
                        return
                    ui.navigate.to(TODOS_PATH)

                with ui.row().classes("gap-3 pt-4"):
                    ui.button("Update Todo", on_click=handle_save).props("no-caps").classes(C_BTN_PRIM)
                    ui.button("Cancel", on_click=lambda: ui.navigate.to(TODOS_PATH)).props("no-caps").classes(C_BTN_SEC)
        return None
