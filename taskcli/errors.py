"""Error kinds raised by the store and the task operations.

Every error carries a message fit to show the user as-is; the CLI prints
it and exits non-zero.
"""

from pathlib import Path
from typing import Optional


class TaskError(Exception):
    """Base class for all task list errors"""


class ValidationError(TaskError):
    """Bad input shape: empty description, non-positive id"""


class DuplicateError(TaskError):
    """A task with the same description already exists"""


class NotFoundError(TaskError):
    """No task has the requested id"""

    def __init__(self, task_id: int):
        super().__init__(f"Task with ID {task_id} not found.")
        self.task_id = task_id


class PersistenceError(TaskError):
    """The snapshot file could not be read or written"""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
