"""
TASKCLI - Persistent Task List
==============================

A small task list kept in a single JSON file. Every operation loads the
file, applies one change and writes it back.

Usage:
    from taskcli import TaskManager, TaskStore

    manager = TaskManager(TaskStore("tasks.json"))
    manager.add_task("Water plants")
    manager.complete_task(1)
    print(manager.get_status_report())
"""

from .schema import (
    Task,
    TaskSnapshot,
    TaskSummary,
)

from .errors import (
    TaskError,
    ValidationError,
    DuplicateError,
    NotFoundError,
    PersistenceError,
)

from .store import TaskStore
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskStore",
    "Task",
    "TaskSnapshot",
    "TaskSummary",
    "TaskError",
    "ValidationError",
    "DuplicateError",
    "NotFoundError",
    "PersistenceError",
]
