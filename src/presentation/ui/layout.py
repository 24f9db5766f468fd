from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from nicegui import ui

from application.contracts.todo_dtos import CallerIdentity
from presentation.auth_guard import clear_auth_session
from presentation.ui.styles import APP_HEAD_HTML, C_BG, C_BRAND, C_BTN_SEC, C_CONTAINER, C_HEADER, C_LINK


def render_header(caller: Optional[CallerIdentity]) -> None:
    with ui.row().classes(C_HEADER):
        ui.link("Todo App", "/").classes(C_BRAND)
        with ui.row().classes("items-center gap-4"):
            if caller:
                ui.link("Dashboard", "/dashboard").classes(C_LINK)

                def handle_logout() -> None:
                    clear_auth_session()
                    ui.navigate.to("/")

                ui.button("Logout", on_click=handle_logout).props("flat no-caps").classes(C_BTN_SEC)
            else:
                ui.link("Sign In", "/login").classes(C_LINK)
                ui.link("Sign Up", "/signup").classes(C_LINK)


@contextmanager
def page_layout(caller: Optional[CallerIdentity]):
    ui.add_head_html(APP_HEAD_HTML)
    with ui.column().classes(f"{C_BG} w-full gap-0"):
        render_header(caller)
        with ui.column().classes(C_CONTAINER) as content:
            yield content
