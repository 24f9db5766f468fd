"""Run the Todo App (NiceGUI pages + JSON API)."""

import logging

from nicegui import app, ui

from composition_root import create_app_container
from infrastructure.config.env import load_env
from infrastructure.config.settings import Settings
from infrastructure.logging_setup import setup_logging
from presentation.api.todo_routes import build_todo_router
from presentation.ui.pages import register_pages

logger = logging.getLogger(__name__)


def run() -> None:
    load_env()
    # Missing TODO_DATABASE_URL raises ConfigurationError here and stops the process.
    settings = Settings.from_env()
    setup_logging(settings.log_dir, settings.debug)

    container = create_app_container(settings)
    container.connections.get_connection()
    app.on_shutdown(container.connections.dispose)

    app.include_router(build_todo_router(container))
    register_pages(container)

    logger.info("app.start", extra={"host": settings.host, "port": settings.port})
    ui.run(
        title="Todo App",
        host=settings.host,
        port=settings.port,
        storage_secret=settings.storage_secret,
        favicon="✅",
        reload=settings.debug,
    )


if __name__ in {"__main__", "__mp_main__"}:
    run()
