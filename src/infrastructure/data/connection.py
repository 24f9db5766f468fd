from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, SQLModel, create_engine

from infrastructure.config.settings import DATABASE_URL_ENV, ConfigurationError

# Registers the tables on SQLModel.metadata before create_all runs.
from infrastructure.data import models  # noqa: F401

logger = logging.getLogger(__name__)


class ConnectionProvider:
    """Lazily opens one shared engine and hands it out for the provider's lifetime.

    The composition root builds a single provider per process and injects it
    wherever store access is needed. Concurrent first calls block on the
    construction lock and then reuse the engine the winner created.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        database_url = (database_url or "").strip()
        if not database_url:
            raise ConfigurationError(f"{DATABASE_URL_ENV} is not configured")
        self._database_url = database_url
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._lock = threading.Lock()

    @property
    def database_url(self) -> str:
        return self._database_url

    def get_connection(self) -> Engine:
        engine = self._engine
        if engine is not None:
            return engine
        with self._lock:
            if self._engine is None:
                self._engine = self._open()
            return self._engine

    def _open(self) -> Engine:
        url = make_url(self._database_url)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            # NiceGUI handlers and FastAPI's threadpool share the engine.
            connect_args["check_same_thread"] = False
            if url.database and url.database != ":memory:":
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(self._database_url, echo=self._echo, connect_args=connect_args)
        SQLModel.metadata.create_all(engine)
        logger.info(
            "db.connected",
            extra={"backend": url.get_backend_name(), "database": url.database},
        )
        return engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.get_connection()) as session:
            yield session

    def dispose(self) -> None:
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None
