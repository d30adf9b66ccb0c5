# src/task_tracker/errors.py

"""
Error taxonomy.

Every error is terminal for the current invocation: the entry point prints it
and exits non-zero. A missing storage file is not an error.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for errors reported to the user."""


class StorageIOError(TaskTrackerError, OSError):
    """Storage file could not be read or written."""


class DecodeError(TaskTrackerError, ValueError):
    """Storage file exists but its contents are not a valid task list."""


class TaskNotFound(TaskTrackerError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidInput(TaskTrackerError, ValueError):
    """User input could not be interpreted (e.g. a non-numeric id)."""
