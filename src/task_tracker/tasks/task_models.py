# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class TaskStatus(IntEnum):
    """
    Task lifecycle status.

    Stored on disk as the integer value; shown to the user as the label.
    """

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, raw: str) -> TaskStatus:
        for status, label in _LABELS.items():
            if label == raw:
                return status
        raise ValueError(f"unknown status: {raw!r}")

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(_LABELS[s] for s in cls)


_LABELS = {
    TaskStatus.TODO: "todo",
    TaskStatus.IN_PROGRESS: "in-progress",
    TaskStatus.DONE: "done",
}


def now_local() -> datetime:
    return datetime.now().astimezone()


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime
