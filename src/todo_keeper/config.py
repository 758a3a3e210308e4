# src/todo_keeper/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object per invocation, built by get_settings().
- The default task file lives in the user's home directory; the home lookup is
  deferred to resolve_task_file() so a missing home surfaces as InitializationError
  when the store is opened, not at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import InitializationError

ENV_PREFIX = "TODO_KEEPER"
DEFAULT_FILE_NAME = ".rust_todos.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_dir: Path | None

    # ---- Storage ----
    task_file: Path | None
    strict_load: bool

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            log_level=_env(_k("LOG_LEVEL"), "ERROR"),
            log_dir=_env_path(_k("LOG_DIR")),
            task_file=_env_path(_k("FILE")),
            strict_load=_env_bool(_k("STRICT_LOAD"), False),
        )

    def resolve_task_file(self) -> Path:
        """Explicit TODO_KEEPER_FILE, else ~/.rust_todos.json."""
        if self.task_file is not None:
            return self.task_file
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise InitializationError("Could not find home directory") from e
        return home / DEFAULT_FILE_NAME


def get_settings() -> Settings:
    # Real environment variables win over .env entries.
    load_dotenv(override=False)
    return Settings.from_env()
