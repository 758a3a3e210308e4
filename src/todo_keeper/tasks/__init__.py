"""
Task subsystem.

Components:
- task_models.py: data structure (Task) and its JSON mapping
- task_store.py: JSON-file-backed ordered collection with add/complete/remove
"""

from .task_models import Task
from .task_store import TaskStore

__all__ = ["Task", "TaskStore"]
