# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- reads settings once,
- configures logging from them,
- resolves the task file and opens the TaskStore.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.ERROR)
    if not isinstance(console_level, int):
        console_level = logging.ERROR
    setup_logging(log_dir=settings.log_dir, console_level=console_level)


def open_task_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Open the TaskStore for this invocation.

    Raises InitializationError (no home directory), TaskFileParseError (strict mode)
    or OSError / UnicodeDecodeError (file exists but cannot be read).
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = settings.resolve_task_file()
    return TaskStore.load(path, strict=settings.strict_load)
