# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Reads settings and initializes logging, then runs exactly one command. The TaskStore
is opened only after click has parsed the command's arguments. Every command exits 0
except argument errors (click usage errors).
"""

from __future__ import annotations

import functools
import logging

import click

from .. import __version__
from ..config import Settings, get_settings
from ..errors import PersistenceError, TaskNotFoundError, TodoKeeperError
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore
from .bootstrap import configure_logging, open_task_store

logger = logging.getLogger(__name__)

ID_WIDTH = 5
STATUS_WIDTH = 10


def format_table(tasks: list[Task]) -> list[str]:
    lines = [f"{'ID':<{ID_WIDTH}} {'Status':<{STATUS_WIDTH}} Description", "-" * 30]
    for task in tasks:
        lines.append(
            f"{task.id:<{ID_WIDTH}} {task.status_marker:<{STATUS_WIDTH}} {task.description}"
        )
    return lines


def _open_store_or_exit(ctx: click.Context) -> TaskStore:
    settings: Settings = ctx.find_object(Settings)
    try:
        return open_task_store(settings=settings)
    except (TodoKeeperError, OSError, UnicodeDecodeError) as e:
        logger.debug("Store initialization failed", exc_info=True)
        click.echo(f"Error initializing TodoManager: {e}", err=True)
        ctx.exit(0)


def pass_store(f):
    """Open the TaskStore after click has parsed the subcommand's arguments."""

    @click.pass_context
    def new_func(ctx: click.Context, *args, **kwargs):
        return ctx.invoke(f, _open_store_or_exit(ctx), *args, **kwargs)

    return functools.update_wrapper(new_func, f)


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="todo-keeper")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Personal todo list kept in ~/.rust_todos.json.

    Examples:

        todo-keeper add "buy milk"
        todo-keeper list
        todo-keeper complete 1
        todo-keeper remove 1
    """
    settings = get_settings()
    configure_logging(settings)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _open_store_or_exit(ctx)
        click.echo("No command specified. Use --help to see available commands.")


@cli.command()
@click.argument("description")
@pass_store
def add(store: TaskStore, description: str) -> None:
    """Add a new todo."""
    try:
        store.add(description)
    except PersistenceError as e:
        click.echo(f"Failed to save todo: {e}", err=True)
        return
    click.echo("Todo added successfully!")


@cli.command(name="list")
@pass_store
def list_(store: TaskStore) -> None:
    """List all todos."""
    tasks = store.list_tasks()
    if not tasks:
        click.echo("No todos found.")
        return
    for line in format_table(tasks):
        click.echo(line)


@cli.command()
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@pass_store
def complete(store: TaskStore, task_id: int) -> None:
    """Mark a todo as completed."""
    try:
        store.complete(task_id)
    except TaskNotFoundError as e:
        click.echo(str(e))
        return
    except PersistenceError as e:
        click.echo(f"Failed to save changes: {e}", err=True)
        return
    click.echo(f"Todo {task_id} marked as completed!")


@cli.command()
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@pass_store
def remove(store: TaskStore, task_id: int) -> None:
    """Remove a todo."""
    try:
        store.remove(task_id)
    except TaskNotFoundError as e:
        click.echo(str(e))
        return
    except PersistenceError as e:
        click.echo(f"Failed to save changes: {e}", err=True)
        return
    click.echo(f"Todo {task_id} removed successfully!")


def main() -> None:
    cli(prog_name="todo-keeper")


if __name__ == "__main__":
    main()
