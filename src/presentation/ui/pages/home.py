from __future__ import annotations

from fastapi.responses import RedirectResponse
from nicegui import ui

from composition_root.container import AppContainer
from presentation.auth_guard import is_authenticated
from presentation.ui.layout import page_layout
from presentation.ui.styles import C_BTN_PRIM, C_CARD, C_PAGE_TITLE, C_TEXT_SUBTLE


def register_home_pages(container: AppContainer) -> None:
    @ui.page("/")
    def home_page() -> None:
        caller = is_authenticated(container.accounts)
        with page_layout(caller):
            ui.label("Todo App").classes(C_PAGE_TITLE)
            with ui.card().classes(f"{C_CARD} p-4 w-full gap-3"):
                if caller:
                    ui.label("Welcome back!").classes("text-sm text-slate-700")
                    ui.button("Go to your todos", on_click=lambda: ui.navigate.to("/dashboard/todos")).classes(C_BTN_PRIM)
                else:
                    ui.label("Sign in to keep track of your tasks.").classes(C_TEXT_SUBTLE)
                    ui.button("Sign In", on_click=lambda: ui.navigate.to("/login")).classes(C_BTN_PRIM)

    @ui.page("/dashboard")
    def dashboard_page():
        return RedirectResponse("/dashboard/todos")
