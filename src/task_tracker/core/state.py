# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Prompter, TaskStorePort


@dataclass(slots=True)
class AppState:
    # Settings kept on the state so commands can read app_name / quit_word.
    settings: object

    store: TaskStorePort
    prompter: Prompter
