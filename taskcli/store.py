"""
TASKCLI - Snapshot Store
========================
Loads and saves the whole task collection as one JSON file.
The file is the single source of truth; nothing is cached between calls.
"""

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import pydantic

from .errors import PersistenceError
from .schema import Task, TaskSnapshot, drop_duplicates, renumber

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"


class TaskStore:
    """
    JSON snapshot store

    - load(): missing file -> empty list (informational notice)
    - load(): unreadable or invalid file -> empty list, error kept on load_error
    - load(): repeated descriptions keep their first copy; ids come back as 1..N
    - save(): full overwrite via a sibling .tmp file and os.replace
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)
        self.load_error: Optional[PersistenceError] = None

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """Load the task collection from the snapshot file"""
        self.load_error = None

        if not self.path.exists():
            logger.info("No tasks found, starting fresh.")
            return []

        try:
            data = self.path.read_text(encoding="utf-8")
            tasks = TaskSnapshot.validate_json(data)
        except (OSError, UnicodeDecodeError, pydantic.ValidationError) as e:
            self.load_error = PersistenceError(
                f"Error reading {self.path}: {e}", path=self.path
            )
            logger.error(str(self.load_error))
            return []

        unique = drop_duplicates(tasks)
        if len(unique) != len(tasks):
            logger.warning(
                f"Dropped {len(tasks) - len(unique)} duplicate task(s) from {self.path}"
            )

        normalized = renumber(unique)
        if [t.id for t in unique] != [t.id for t in normalized]:
            logger.warning(f"Task ids in {self.path} were out of sequence; renumbered 1..{len(normalized)}")

        logger.debug(f"Loaded {len(normalized)} tasks from {self.path}")
        return normalized

    def save(self, tasks: List[Task]) -> None:
        """Overwrite the snapshot with the full collection"""
        payload = json.dumps(
            [task.model_dump(mode="json") for task in tasks],
            indent=2,
            ensure_ascii=False,
        )

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise PersistenceError(f"Error saving tasks: {e}", path=self.path) from e

        logger.info("Tasks saved successfully.")

    def clear(self) -> None:
        """Replace the snapshot with an empty collection"""
        self.save([])
