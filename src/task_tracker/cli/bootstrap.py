# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and wires
the JSON store (at the configured path) and the console prompter into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import JsonTaskStore
from .prompts import ConsolePrompter

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonTaskStore(settings.storage_path)
    logger.debug("Using storage %s", store.path)

    return AppState(
        settings=settings,
        store=store,
        prompter=ConsolePrompter(),
    )
