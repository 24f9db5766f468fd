from __future__ import annotations

import threading
import time

import pytest
from sqlalchemy import inspect

from infrastructure.config.settings import ConfigurationError
from infrastructure.data import connection as connection_module
from infrastructure.data.connection import ConnectionProvider


def test_get_connection_returns_same_engine(connections) -> None:
    first = connections.get_connection()

    assert connections.get_connection() is first


def test_first_connection_creates_tables(connections) -> None:
    tables = set(inspect(connections.get_connection()).get_table_names())

    assert {"todos", "user_accounts"} <= tables


@pytest.mark.parametrize("url", ["", "   ", None])
def test_missing_database_url_fails_fast(url) -> None:
    with pytest.raises(ConfigurationError):
        ConnectionProvider(url)


def test_concurrent_first_calls_open_one_engine(tmp_path, monkeypatch) -> None:
    real_create_engine = connection_module.create_engine
    opened: list[object] = []

    def slow_create_engine(*args, **kwargs):
        time.sleep(0.05)
        engine = real_create_engine(*args, **kwargs)
        opened.append(engine)
        return engine

    monkeypatch.setattr(connection_module, "create_engine", slow_create_engine)
    provider = ConnectionProvider(f"sqlite:///{tmp_path}/race.db")
    barrier = threading.Barrier(8)
    results: list[object] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        engine = provider.get_connection()
        with results_lock:
            results.append(engine)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    try:
        assert len(opened) == 1
        assert len(results) == 8
        assert all(engine is opened[0] for engine in results)
    finally:
        provider.dispose()


def test_dispose_allows_reopen(connections) -> None:
    first = connections.get_connection()
    connections.dispose()

    assert connections.get_connection() is not first
