from __future__ import annotations

from composition_root.container import AppContainer

from .auth import register_auth_pages
from .home import register_home_pages
from .todo_edit import register_todo_edit_page
from .todos import register_todo_pages


def register_pages(container: AppContainer) -> None:
    """Register every @ui.page route against one container."""
    register_home_pages(container)
    register_auth_pages(container)
    register_todo_pages(container)
    register_todo_edit_page(container)
