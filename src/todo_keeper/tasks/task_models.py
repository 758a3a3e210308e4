# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def status_marker(self) -> str:
        return "[x]" if self.completed else "[ ]"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        Raises ValueError if a field is missing or has the wrong type.
        bool is rejected for `id` even though it is an int subclass.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")

        try:
            task_id = raw["id"]
            description = raw["description"]
            completed = raw["completed"]
        except KeyError as e:
            raise ValueError(f"task entry is missing field {e.args[0]!r}") from None

        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise ValueError(f"invalid task id: {task_id!r}")
        if not isinstance(description, str):
            raise ValueError(f"invalid description for task {task_id}")
        if not isinstance(completed, bool):
            raise ValueError(f"invalid completed flag for task {task_id}")

        return cls(id=task_id, description=description, completed=completed)
