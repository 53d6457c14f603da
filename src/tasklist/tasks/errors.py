# tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskListError(Exception):
    """Base class for all errors raised by the task list."""


class UserInputError(TaskListError, ValueError):
    """Bad input typed by the user (empty title, empty query, bad id)."""


class TaskNotFoundError(TaskListError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"No task with ID {task_id}.")
        self.task_id = task_id


class StorageError(TaskListError):
    """
    The tasks file could not be used.

    These are not recoverable: a store that cannot persist must not keep running.
    """

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class StorageWriteError(StorageError):
    pass


class StorageReadError(StorageError):
    pass
