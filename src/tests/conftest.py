from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from application.contracts.todo_dtos import CallerIdentity
from composition_root.container import AppContainer, build_container
from infrastructure.data.connection import ConnectionProvider
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from infrastructure.data.repositories.sql_todo_repository import SqlTodoRepository
from infrastructure.identity.user_accounts import UserAccountService


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self) -> None:
        self.current = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def alice() -> CallerIdentity:
    return CallerIdentity(subject="user_alice")


@pytest.fixture()
def bob() -> CallerIdentity:
    return CallerIdentity(subject="user_bob")


@pytest.fixture()
def in_memory_todo_repo(clock: StepClock) -> InMemoryTodoRepository:
    return InMemoryTodoRepository(clock=clock)


@pytest.fixture()
def connections(tmp_path: Path):
    provider = ConnectionProvider(f"sqlite:///{tmp_path}/todos.db")
    yield provider
    provider.dispose()


@pytest.fixture()
def sql_todo_repo(connections: ConnectionProvider, clock: StepClock) -> SqlTodoRepository:
    return SqlTodoRepository(connections, clock=clock)


@pytest.fixture(params=["memory", "sqlite"])
def container(request: pytest.FixtureRequest, clock: StepClock, tmp_path: Path) -> AppContainer:
    if request.param == "memory":
        return build_container(InMemoryTodoRepository(clock=clock))
    provider = ConnectionProvider(f"sqlite:///{tmp_path}/container.db")
    request.addfinalizer(provider.dispose)
    return build_container(
        SqlTodoRepository(provider, clock=clock),
        connections=provider,
        accounts=UserAccountService(provider),
    )
