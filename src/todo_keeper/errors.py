# src/todo_keeper/errors.py

"""Error taxonomy shared by the store and the CLI."""

from __future__ import annotations


class TodoKeeperError(Exception):
    """Base class for all todo_keeper errors."""


class InitializationError(TodoKeeperError):
    """The persistence file location could not be resolved (e.g. no home directory)."""


class PersistenceError(TodoKeeperError):
    """Writing the task file failed. The in-memory change is not durable."""


class TaskFileParseError(TodoKeeperError):
    """The task file exists but its contents are not a valid task list (strict mode only)."""


class TaskNotFoundError(TodoKeeperError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Todo with id {task_id} not found.")
        self.task_id = task_id
