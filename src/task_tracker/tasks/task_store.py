# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import DecodeError, StorageIOError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

_FIELDS = ("id", "description", "status", "createdAt", "updatedAt")


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "status": int(task.status),
        "createdAt": task.created_at.isoformat(sep=" ", timespec="microseconds"),
        "updatedAt": task.updated_at.isoformat(sep=" ", timespec="microseconds"),
    }


def _decode_status(raw: Any) -> TaskStatus:
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, int) and not isinstance(raw, bool):
        return TaskStatus(raw)
    if isinstance(raw, str):
        return TaskStatus.from_label(raw)
    raise ValueError(f"status must be an integer or a name, got {raw!r}")


def _decode_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {raw!r}")
    return datetime.fromisoformat(raw)


def record_to_task(record: Any) -> Task:
    """Decode one stored record. Raises DecodeError on any malformed field."""
    if not isinstance(record, dict):
        raise DecodeError(f"task record must be an object, got {type(record).__name__}")

    missing = [name for name in _FIELDS if name not in record]
    if missing:
        raise DecodeError(f"task record is missing fields: {', '.join(missing)}")

    task_id = record["id"]
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        raise DecodeError(f"task id must be an integer, got {task_id!r}")
    description = record["description"]
    if not isinstance(description, str):
        raise DecodeError(f"task {task_id}: description must be a string")

    try:
        status = _decode_status(record["status"])
        created_at = _decode_timestamp(record["createdAt"])
        updated_at = _decode_timestamp(record["updatedAt"])
    except ValueError as exc:
        raise DecodeError(f"task {task_id}: {exc}") from exc

    if updated_at < created_at:
        raise DecodeError(f"task {task_id}: updatedAt is earlier than createdAt")

    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=created_at,
        updated_at=updated_at,
    )


class JsonTaskStore:
    """
    JSON file task store.

    The whole collection is read on load() and written back on save().
    There is no locking: two invocations running at the same time can lose
    each other's writes (last writer wins).
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        """
        Read all tasks, sorted by id.

        A missing file is an empty collection, not an error.
        """
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("Storage %s does not exist yet; starting empty", self._path)
            return []
        except UnicodeDecodeError as exc:
            raise DecodeError(f"{self._path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StorageIOError(f"cannot read {self._path}: {exc}") from exc

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"{self._path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise DecodeError(f"{self._path} must contain a JSON array of tasks")

        tasks = sorted((record_to_task(r) for r in data), key=lambda t: t.id)
        for prev, cur in zip(tasks, tasks[1:]):
            if prev.id == cur.id:
                raise DecodeError(f"{self._path} contains duplicate task id {cur.id}")

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """
        Overwrite the storage file with the full collection.

        Written to a temporary sibling and then renamed over the target, so an
        interrupted save leaves the previous contents in place.
        """
        payload = json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageIOError(f"cannot write {self._path}: {exc}") from exc

        logger.info("Saved %d tasks to %s", len(tasks), self._path)
