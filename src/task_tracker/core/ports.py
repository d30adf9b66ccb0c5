# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on these Protocols instead of the JSON store and the real
console, so tests can pass an in-memory store and scripted input.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskStorePort(Protocol):
    """Whole-collection persistence: one load per run, one save per mutating command."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: list[Task]) -> None: ...


class Prompter(Protocol):
    """Line-oriented console input. Returns None at end of input."""

    def read_line(self, message: str) -> str | None: ...
