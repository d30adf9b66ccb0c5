# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import JsonTaskStore

from .fakes import InMemoryTaskStore, ScriptedPrompter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    A SimpleNamespace rather than the real config, so tests do not depend on
    the environment or a local .env file.
    """
    return SimpleNamespace(
        app_name="task-cli",
        log_level="WARNING",
        log_dir=None,
        storage_path=tmp_path / "tasks.json",
        quit_word="q",
    )


@pytest.fixture()
def json_store(settings: SimpleNamespace) -> JsonTaskStore:
    return JsonTaskStore(settings.storage_path)


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture()
def state(settings: SimpleNamespace, memory_store, prompter) -> AppState:
    """AppState wired with the in-memory store and scripted console input."""
    return AppState(settings=settings, store=memory_store, prompter=prompter)


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """main() reconfigures the root logger; drop what it added after each test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
