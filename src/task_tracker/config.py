# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

Variables (all optional):
- TASK_TRACKER_APP_NAME      program name shown in help (default: task-cli)
- TASK_TRACKER_LOG_LEVEL     console log level (default: WARNING)
- TASK_TRACKER_LOG_DIR       directory for task-tracker.log (default: no file log)
- TASK_TRACKER_STORAGE_PATH  tasks JSON file (default: ./tasks.json)
- TASK_TRACKER_QUIT_WORD     word that cancels an interactive prompt (default: q)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    return _env_optional_path(name) or default


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str
    log_level: str
    log_dir: Path | None

    storage_path: Path
    quit_word: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "task-cli"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").upper(),
            log_dir=_env_optional_path(_k("LOG_DIR")),
            storage_path=_env_path(_k("STORAGE_PATH"), Path("tasks.json")),
            quit_word=_env(_k("QUIT_WORD"), "q"),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
