# src/task_tracker/tasks/task_ops.py

"""
In-memory operations on a loaded task collection.

The collection is a list kept strictly increasing by id: load() sorts it and
add_task() always appends max id + 1. Lookups rely on that order (binary
search) and do not re-check it.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Iterator
from datetime import datetime

from ..errors import TaskNotFound
from .task_models import Task, TaskStatus, now_local

logger = logging.getLogger(__name__)


def find_index(tasks: list[Task], task_id: int) -> int | None:
    """Index of the task with `task_id`, or None if absent."""
    i = bisect.bisect_left(tasks, task_id, key=lambda t: t.id)
    if i < len(tasks) and tasks[i].id == task_id:
        return i
    return None


def _require_index(tasks: list[Task], task_id: int) -> int:
    i = find_index(tasks, task_id)
    if i is None:
        raise TaskNotFound(task_id)
    return i


def next_id(tasks: list[Task]) -> int:
    return tasks[-1].id + 1 if tasks else 1


def add_task(
    tasks: list[Task], description: str, *, now: datetime | None = None
) -> tuple[list[Task], Task]:
    """Append a new `todo` task. Returns the same list (mutated) and the new task."""
    if now is None:
        now = now_local()
    task = Task(
        id=next_id(tasks),
        description=description,
        status=TaskStatus.TODO,
        created_at=now,
        updated_at=now,
    )
    tasks.append(task)
    logger.debug("Task added id=%s", task.id)
    return tasks, task


def update_description(
    tasks: list[Task], task_id: int, description: str, *, now: datetime | None = None
) -> None:
    i = _require_index(tasks, task_id)
    task = tasks[i]
    task.description = description
    task.updated_at = now if now is not None else now_local()
    logger.debug("Task id=%s description updated", task_id)


def update_status(
    tasks: list[Task], task_id: int, status: TaskStatus, *, now: datetime | None = None
) -> None:
    i = _require_index(tasks, task_id)
    task = tasks[i]
    task.status = status
    task.updated_at = now if now is not None else now_local()
    logger.debug("Task id=%s status=%s", task_id, status.label)


def delete_task(tasks: list[Task], task_id: int) -> list[Task]:
    """Remove the task in place; later tasks shift down one slot, ids are kept."""
    i = _require_index(tasks, task_id)
    del tasks[i]
    logger.debug("Task deleted id=%s", task_id)
    return tasks


def list_tasks(tasks: list[Task], status: TaskStatus | None = None) -> Iterator[Task]:
    """Tasks in ascending id order, optionally restricted to one status."""
    for task in tasks:
        if status is None or task.status == status:
            yield task
