from __future__ import annotations

from contextlib import contextmanager
import logging

from fastapi.responses import RedirectResponse
from nicegui import ui

from composition_root.container import AppContainer
from infrastructure.identity.user_accounts import MIN_PASSWORD_LENGTH, AccountError
from presentation.auth_guard import clear_auth_session, sign_in
from presentation.ui.styles import APP_HEAD_HTML, C_ERROR_TEXT, C_LINK

TITLE_TEXT = "text-2xl font-semibold text-slate-900 text-center"
SUBTITLE_TEXT = "text-sm text-slate-500 text-center"
INPUT_CLASSES = "w-full"
PRIMARY_BUTTON = "w-full bg-slate-900 text-white rounded-lg hover:bg-slate-800"
CARD_CLASSES = "w-full max-w-[400px] bg-white rounded-xl shadow-lg border border-slate-200 p-6"
BG_CLASSES = "min-h-screen w-full bg-slate-50 flex items-center justify-center px-4"
logger = logging.getLogger(__name__)


@contextmanager
def auth_layout(title: str, subtitle: str):
    ui.add_head_html(APP_HEAD_HTML)
    with ui.element("div").classes(BG_CLASSES):
        with ui.column().classes("w-full items-center gap-6"):
            ui.link("Todo App", "/").classes("text-lg font-semibold text-slate-900 no-underline")
            with ui.column().classes(f"{CARD_CLASSES} gap-4"):
                ui.label(title).classes(TITLE_TEXT)
                if subtitle:
                    ui.label(subtitle).classes(SUBTITLE_TEXT)
                with ui.column().classes("w-full gap-4") as card:
                    yield card


def _error_label() -> ui.label:
    label = ui.label("").classes(C_ERROR_TEXT)
    label.set_visibility(False)
    return label


def _set_error(label: ui.label, message: str) -> None:
    label.text = message
    label.set_visibility(bool(message))


def register_auth_pages(container: AppContainer) -> None:
    accounts = container.accounts

    @ui.page("/login")
    def login_page():
        with auth_layout("Welcome back", "Sign in to your account"):
            with ui.column().classes("w-full gap-1"):
                email_input = ui.input("Email").props("outlined dense").classes(INPUT_CLASSES)
                email_error = _error_label()
            with ui.column().classes("w-full gap-1"):
                password_input = ui.input("Password").props("outlined dense type=password").classes(INPUT_CLASSES)
                password_error = _error_label()
            status_error = _error_label()

            def handle_login() -> None:
                _set_error(email_error, "")
                _set_error(password_error, "")
                _set_error(status_error, "")
                email = (email_input.value or "").strip()
                password = password_input.value or ""
                if not email:
                    _set_error(email_error, "Email is required")
                if not password:
                    _set_error(password_error, "Password is required")
                if not email or not password:
                    return
                subject = accounts.authenticate(email, password) if accounts else None
                if not subject:
                    _set_error(status_error, "Invalid credentials")
                    return
                sign_in(subject)
                ui.navigate.to("/dashboard/todos")

            ui.button("Log in", on_click=handle_login).classes(PRIMARY_BUTTON)
            with ui.row().classes("w-full justify-end"):
                ui.link("Create account", "/signup").classes(C_LINK)

    @ui.page("/signup")
    def signup_page():
        with auth_layout("Create account", "Start with your email and a password"):
            with ui.column().classes("w-full gap-1"):
                email_input = ui.input("Email").props("outlined dense").classes(INPUT_CLASSES)
                email_error = _error_label()
            with ui.column().classes("w-full gap-1"):
                password_input = ui.input("Password").props("outlined dense type=password").classes(INPUT_CLASSES)
                password_error = _error_label()
            with ui.column().classes("w-full gap-1"):
                confirm_input = ui.input("Confirm password").props("outlined dense type=password").classes(INPUT_CLASSES)
                confirm_error = _error_label()
            status_error = _error_label()

            def handle_signup() -> None:
                for label in (email_error, password_error, confirm_error, status_error):
                    _set_error(label, "")
                email = (email_input.value or "").strip()
                password = password_input.value or ""
                if not email:
                    _set_error(email_error, "Email is required")
                    return
                if len(password) < MIN_PASSWORD_LENGTH:
                    _set_error(password_error, f"At least {MIN_PASSWORD_LENGTH} characters")
                    return
                if password != (confirm_input.value or ""):
                    _set_error(confirm_error, "Passwords do not match")
                    return
                if accounts is None:
                    _set_error(status_error, "Sign-up is not available")
                    return
                try:
                    subject = accounts.create_account(email, password)
                except AccountError as exc:
                    _set_error(status_error, str(exc))
                    return
                sign_in(subject)
                ui.navigate.to("/dashboard/todos")

            ui.button("Create account", on_click=handle_signup).classes(PRIMARY_BUTTON)
            with ui.row().classes("w-full justify-end"):
                ui.link("Already have an account? Sign in", "/login").classes(C_LINK)

    @ui.page("/logout")
    def logout_page():
        clear_auth_session()
        return RedirectResponse("/")
