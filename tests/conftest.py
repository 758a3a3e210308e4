# tests/conftest.py

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from todo_keeper.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any TODO_KEEPER_* vars from the developer's shell or a .env."""
    for name in ("FILE", "LOG_LEVEL", "LOG_DIR", "STRICT_LOAD"):
        monkeypatch.delenv(f"TODO_KEEPER_{name}", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def write_tasks(task_file: Path):
    """Write raw task dicts to the task file, the way a previous run would have."""

    def _write(items: list[dict]) -> Path:
        task_file.write_text(json.dumps(items, indent=2), "utf-8")
        return task_file

    return _write


@pytest.fixture()
def store(task_file: Path) -> TaskStore:
    return TaskStore.load(task_file)
