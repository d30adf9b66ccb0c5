# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from task_tracker.config import Settings

_VARS = (
    "TASK_TRACKER_APP_NAME",
    "TASK_TRACKER_LOG_LEVEL",
    "TASK_TRACKER_LOG_DIR",
    "TASK_TRACKER_STORAGE_PATH",
    "TASK_TRACKER_QUIT_WORD",
)


def test_defaults(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.app_name == "task-cli"
    assert s.log_level == "WARNING"
    assert s.log_dir is None
    assert s.storage_path == Path("tasks.json")
    assert s.quit_word == "q"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_STORAGE_PATH", str(tmp_path / "my.json"))
    monkeypatch.setenv("TASK_TRACKER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_QUIT_WORD", "exit")
    monkeypatch.setenv("TASK_TRACKER_APP_NAME", "todo")
    s = Settings.from_env()
    assert s.storage_path == tmp_path / "my.json"
    assert s.log_dir == tmp_path / "logs"
    assert s.log_level == "DEBUG"
    assert s.quit_word == "exit"
    assert s.app_name == "todo"


def test_blank_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_STORAGE_PATH", "  ")
    monkeypatch.setenv("TASK_TRACKER_QUIT_WORD", "")
    s = Settings.from_env()
    assert s.storage_path == Path("tasks.json")
    assert s.quit_word == "q"
