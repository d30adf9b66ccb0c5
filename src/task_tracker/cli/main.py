# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and maps
errors to the exit status (0 success / help / quit, 1 on any error).
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..errors import TaskTrackerError
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state
from .commands import EXIT_ERROR, EXIT_OK, registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    try:
        setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)
    except OSError as exc:
        print(f"Error: cannot set up logging: {exc}", file=sys.stderr)
        return EXIT_ERROR

    state = create_initial_state(settings=settings)

    try:
        return registry.handle(state, argv)
    except TaskTrackerError as exc:
        logger.debug("Command failed: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting.")
        return EXIT_OK
    except Exception as exc:
        logger.exception("Unexpected error")
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
