# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_keeper.cli.bootstrap import configure_logging, open_task_store
from todo_keeper.config import Settings
from todo_keeper.errors import InitializationError


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    s = Settings.from_env()

    assert s.log_level == "ERROR"
    assert s.log_dir is None
    assert s.strict_load is False
    assert s.resolve_task_file() == tmp_path / ".rust_todos.json"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_KEEPER_FILE", str(tmp_path / "mine.json"))
    monkeypatch.setenv("TODO_KEEPER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TODO_KEEPER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_KEEPER_STRICT_LOAD", "yes")

    s = Settings.from_env()

    assert s.resolve_task_file() == tmp_path / "mine.json"
    assert s.log_dir == tmp_path / "logs"
    assert s.log_level == "debug"
    assert s.strict_load is True


def test_unresolvable_home(monkeypatch: pytest.MonkeyPatch) -> None:
    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))

    with pytest.raises(InitializationError):
        Settings.from_env().resolve_task_file()


def test_open_task_store_uses_settings(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    path.write_text('[{"id": 4, "description": "x", "completed": true}]', "utf-8")
    settings = Settings(log_level="ERROR", log_dir=None, task_file=path, strict_load=False)

    store = open_task_store(settings=settings)

    assert store.path == path
    assert [t.id for t in store] == [4]


def test_log_file_written_when_log_dir_set(tmp_path: Path) -> None:
    settings = Settings(
        log_level="ERROR", log_dir=tmp_path / "logs", task_file=None, strict_load=False
    )
    configure_logging(settings)

    logging.getLogger("todo_keeper.test").warning("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello from test" in (tmp_path / "logs" / "todo_keeper.log").read_text("utf-8")
