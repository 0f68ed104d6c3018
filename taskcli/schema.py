"""
TASKCLI - Task Schema Definition
================================
Shape of a single task and of the snapshot file that holds them all.

The snapshot is a plain JSON array:

    [
      {"id": 1, "description": "Water plants", "completed": false}
    ]
"""

from typing import List, Dict, Any
from pydantic import BaseModel, Field, TypeAdapter, field_validator


COMPLETED_MARKER = "✓"
PENDING_MARKER = "x"


class Task(BaseModel):
    """Individual task definition"""
    id: int = Field(ge=1)           # Dense 1..N, re-derived on removal
    description: str                # Trimmed, unique within the collection
    completed: bool = False

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be empty")
        return value

    @property
    def marker(self) -> str:
        return COMPLETED_MARKER if self.completed else PENDING_MARKER

    def render(self) -> str:
        """Single display line, e.g. '1. [x] Water plants'"""
        return f"{self.id}. [{self.marker}] {self.description}"


# The on-disk snapshot: an ordered array of tasks
TaskSnapshot = TypeAdapter(List[Task])


def renumber(tasks: List[Task]) -> List[Task]:
    """Re-derive ids as 1..N from current order"""
    return [
        task.model_copy(update={"id": index})
        for index, task in enumerate(tasks, start=1)
    ]


def drop_duplicates(tasks: List[Task]) -> List[Task]:
    """Keep the first task for each description, in order"""
    seen = set()
    unique = []
    for task in tasks:
        if task.description in seen:
            continue
        seen.add(task.description)
        unique.append(task)
    return unique


class TaskSummary(BaseModel):
    """Derived counts for a task collection (never persisted)"""
    total: int = 0
    completed: int = 0
    pending: int = 0

    @property
    def progress_pct(self) -> int:
        if not self.total:
            return 0
        return int((self.completed / self.total) * 100)

    @classmethod
    def from_tasks(cls, tasks: List[Task]) -> "TaskSummary":
        completed = sum(1 for t in tasks if t.completed)
        return cls(total=len(tasks), completed=completed, pending=len(tasks) - completed)

    def as_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data["progress_pct"] = self.progress_pct
        return data
