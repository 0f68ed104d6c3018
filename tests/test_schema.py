# tests/test_schema.py

from __future__ import annotations

import pydantic
import pytest

from taskcli.schema import Task, TaskSummary, drop_duplicates, renumber


def test_task_render_markers() -> None:
    assert Task(id=1, description="Water plants").render() == "1. [x] Water plants"
    assert Task(id=2, description="Feed cat", completed=True).render() == "2. [✓] Feed cat"


def test_task_rejects_bad_fields() -> None:
    with pytest.raises(pydantic.ValidationError):
        Task(id=0, description="zero")
    with pytest.raises(pydantic.ValidationError):
        Task(id=1, description="  ")


def test_task_trims_description() -> None:
    assert Task(id=1, description=" a ").description == "a"


def test_empty_summary() -> None:
    summary = TaskSummary.from_tasks([])

    assert summary.progress_pct == 0
    assert summary.as_dict() == {"total": 0, "completed": 0, "pending": 0, "progress_pct": 0}


def test_renumber_follows_order_not_old_ids() -> None:
    tasks = [Task(id=7, description="x"), Task(id=3, description="y", completed=True)]

    assert [(t.id, t.description) for t in renumber(tasks)] == [(1, "x"), (2, "y")]
    assert [t.id for t in tasks] == [7, 3]


def test_drop_duplicates_keeps_first_copy() -> None:
    tasks = [
        Task(id=1, description="a", completed=True),
        Task(id=2, description="b"),
        Task(id=3, description=" a "),
    ]

    unique = drop_duplicates(tasks)

    assert [t.description for t in unique] == ["a", "b"]
    assert unique[0].completed is True
