# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskcli.manager import TaskManager
from taskcli.store import TaskStore

from .fakes import InMemoryTaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture()
def manager(store: TaskStore) -> TaskManager:
    """Manager over a real snapshot file in a per-test tmp dir."""
    return TaskManager(store)


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TASKCLI_FILE", raising=False)
    monkeypatch.delenv("TASKCLI_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_taskcli_logger():
    """main() attaches a stderr handler bound to the test's capture; drop it afterwards."""
    yield
    logger = logging.getLogger("taskcli")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
