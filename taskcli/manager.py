"""
TASKCLI - Task Manager
======================
Task operations over the collection held by a TaskStore.

Every operation is one transaction against the snapshot:
load -> validate -> mutate in memory -> save. Nothing survives between calls,
so the store is the only state. Read-only operations never save.
"""

import logging
from typing import List, Optional

from .errors import DuplicateError, NotFoundError, ValidationError
from .schema import Task, TaskSummary, renumber
from .store import TaskStore

logger = logging.getLogger(__name__)


# ========================================
# COLLECTION HELPERS (no I/O)
# ========================================

def next_id(tasks: List[Task]) -> int:
    """Id for a task appended to the collection"""
    return len(tasks) + 1


def find_task(tasks: List[Task], task_id: int) -> Optional[Task]:
    """First task with the given id, or None"""
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def validate_task_id(task_id: int) -> int:
    if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id <= 0:
        raise ValidationError("Please provide a valid positive task ID.")
    return task_id


def format_tasks(tasks: List[Task]) -> str:
    """Human-readable listing, one task per line"""
    if not tasks:
        return "No tasks to show."
    lines = ["Your tasks:"]
    lines.extend(task.render() for task in tasks)
    return "\n".join(lines)


class TaskManager:
    """
    Task list operations

    The store is injected so callers (and tests) decide where the snapshot
    lives. Anything with load() -> List[Task] and save(List[Task]) works.
    """

    def __init__(self, store: Optional[TaskStore] = None):
        self.store = store if store is not None else TaskStore()

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, description: str) -> Task:
        """Append a new pending task"""
        text = (description or "").strip()
        if not text:
            raise ValidationError("Task description cannot be empty or just whitespace.")

        tasks = self.store.load()

        if any(task.description == text for task in tasks):
            raise DuplicateError("Task with this description already exists.")

        task = Task(id=next_id(tasks), description=text, completed=False)
        tasks.append(task)
        self.store.save(tasks)

        logger.debug(f"Added task {task.id}: {task.description}")
        return task

    def remove_task(self, task_id: int) -> Task:
        """Remove a task and renumber the rest"""
        validate_task_id(task_id)

        tasks = self.store.load()
        removed = find_task(tasks, task_id)
        if removed is None:
            raise NotFoundError(task_id)

        remaining = [task for task in tasks if task is not removed]
        self.store.save(renumber(remaining))

        logger.debug(f"Removed task {task_id}; {len(remaining)} remaining")
        return removed

    def complete_task(self, task_id: int) -> Task:
        """Mark a task as completed (idempotent)"""
        validate_task_id(task_id)

        tasks = self.store.load()
        task = find_task(tasks, task_id)
        if task is None:
            raise NotFoundError(task_id)

        if task.completed:
            logger.debug(f"Task {task_id} already completed")
        task.completed = True
        self.store.save(tasks)

        return task

    def list_tasks(self) -> List[Task]:
        """Current collection in display order (read-only)"""
        return self.store.load()

    def clear_tasks(self) -> None:
        """Drop every task, no confirmation"""
        self.store.clear()
        logger.debug("Cleared all tasks")

    # ========================================
    # REPORTING
    # ========================================

    def summary(self) -> TaskSummary:
        return TaskSummary.from_tasks(self.store.load())

    def get_status_report(self) -> str:
        """Generate human-readable task listing"""
        return format_tasks(self.list_tasks())
