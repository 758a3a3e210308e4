# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..errors import PersistenceError, TaskFileParseError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The whole collection lives in memory; every mutation rewrites the whole file:
    - load once per process (missing file -> empty)
    - mutate in memory
    - save() overwrites the file with a pretty-printed JSON array

    No locking: concurrent processes are last-writer-wins.
    """

    def __init__(self, path: str | Path, tasks: list[Task] | None = None) -> None:
        self._path = Path(path)
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def load(cls, path: str | Path, *, strict: bool = False) -> TaskStore:
        """
        Read the task file at `path`.

        A malformed file is treated as an empty collection unless `strict` is set,
        in which case TaskFileParseError is raised. Read errors (permissions etc.)
        propagate as OSError.
        """
        path = Path(path)
        if not path.exists():
            logger.debug("Task file %s does not exist; starting empty", path)
            return cls(path)

        content = path.read_text("utf-8")
        try:
            tasks = cls._parse(content)
        except ValueError as e:
            if strict:
                raise TaskFileParseError(f"{path}: {e}") from e
            logger.warning("Task file %s is malformed (%s); starting empty", path, e)
            return cls(path)

        logger.info("TaskStore ready file=%s total=%d", path, len(tasks))
        return cls(path, tasks)

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- low-level helpers ----

    @staticmethod
    def _parse(content: str) -> list[Task]:
        # json.JSONDecodeError is a ValueError subclass.
        data = json.loads(content)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [Task.from_dict(item) for item in data]

    def _dump(self) -> str:
        return json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False, indent=2)

    def _next_id(self) -> int:
        return max((t.id for t in self._tasks), default=0) + 1

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    # ---- public API ----

    def save(self) -> None:
        """
        Overwrite the task file with the current collection.

        A symlinked task file is written through: the temp file sits next to the
        link target and replaces the target, not the link.
        """
        target = self._path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            tmp.write_text(self._dump(), "utf-8")
            os.replace(tmp, target)
        except (OSError, UnicodeError) as e:
            logger.warning("Failed to save tasks to %s", target, exc_info=True)
            tmp.unlink(missing_ok=True)
            raise PersistenceError(str(e)) from e
        logger.debug("Saved %d tasks to %s", len(self._tasks), target)

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion (display) order."""
        return list(self._tasks)

    def add(self, description: str) -> Task:
        """
        Append a new pending task and persist.

        The task stays in memory even if save() raises PersistenceError.
        """
        task = Task(id=self._next_id(), description=description)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        self.save()
        return task

    def complete(self, task_id: int) -> Task:
        """Mark a task completed and persist. Completing a done task re-saves unchanged data."""
        task = self._tasks[self._index_of(task_id)]
        task.completed = True
        logger.debug("Task completed id=%s", task_id)
        self.save()
        return task

    def remove(self, task_id: int) -> Task:
        """Delete a task and persist. Remaining ids are not renumbered."""
        task = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task removed id=%s", task_id)
        self.save()
        return task
