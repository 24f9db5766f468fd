from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by the todo core."""


class TodoTitleEmptyError(TodoError, ValueError):
    pass


class TodoStorageError(TodoError):
    """The store could not complete an operation (connection or query failure)."""
