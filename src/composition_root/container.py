from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from application.todo.commands.create_todo import CreateTodoCommand
from application.todo.commands.delete_todo import DeleteTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.commands.update_todo import UpdateTodoCommand
from application.todo.queries.get_todo import GetTodoQuery
from application.todo.queries.list_todos import ListTodosQuery
from application.todo.refresh import ViewRefresher
from domain.todo.repositories.todo_repository import TodoRepository
from infrastructure.config.settings import Settings
from infrastructure.data.connection import ConnectionProvider
from infrastructure.data.repositories.sql_todo_repository import SqlTodoRepository
from infrastructure.identity.user_accounts import UserAccountService


@dataclass(frozen=True)
class AppContainer:
    connections: Optional[ConnectionProvider]
    repository: TodoRepository
    refresher: ViewRefresher
    accounts: Optional[UserAccountService]
    create_todo_command: CreateTodoCommand
    toggle_todo_command: ToggleTodoCommand
    update_todo_command: UpdateTodoCommand
    delete_todo_command: DeleteTodoCommand
    list_todos_query: ListTodosQuery
    get_todo_query: GetTodoQuery


def build_container(
    repository: TodoRepository,
    *,
    connections: Optional[ConnectionProvider] = None,
    accounts: Optional[UserAccountService] = None,
    refresher: Optional[ViewRefresher] = None,
) -> AppContainer:
    refresher = refresher or ViewRefresher()
    return AppContainer(
        connections=connections,
        repository=repository,
        refresher=refresher,
        accounts=accounts,
        create_todo_command=CreateTodoCommand(repository, refresher),
        toggle_todo_command=ToggleTodoCommand(repository, refresher),
        update_todo_command=UpdateTodoCommand(repository, refresher),
        delete_todo_command=DeleteTodoCommand(repository, refresher),
        list_todos_query=ListTodosQuery(repository),
        get_todo_query=GetTodoQuery(repository),
    )


def create_app_container(settings: Optional[Settings] = None) -> AppContainer:
    """Wire the process-wide object graph: one connection provider shared by everything."""
    settings = settings or Settings.from_env()
    connections = ConnectionProvider(settings.database_url, echo=settings.debug)
    return build_container(
        SqlTodoRepository(connections),
        connections=connections,
        accounts=UserAccountService(connections),
    )
