# src/task_tracker/cli/prompts.py

"""
Command argument resolution with an interactive fallback.

A positional argument is used when present; otherwise the user is asked on
the console. Typing the quit word (or closing stdin) yields Cancelled, which
the command handler turns into a clean exit. Nothing here exits the process.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core.ports import Prompter
from ..errors import InvalidInput

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_ID_PROMPT = "Invalid id, please enter again['{quit}' for exit]:"


@dataclass(frozen=True, slots=True)
class Provided(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Cancelled:
    pass


class ConsolePrompter:
    """Prompter backed by input(); EOF and Ctrl+C both read as end of input."""

    def read_line(self, message: str) -> str | None:
        try:
            return input(message)
        except EOFError:
            logger.debug("Console EOF received at prompt.")
            return None
        except KeyboardInterrupt:
            logger.debug("Console KeyboardInterrupt at prompt.")
            print()
            return None


def _ask(prompter: Prompter, message: str, quit_word: str) -> str | None:
    line = prompter.read_line(message)
    if line is None:
        return None
    line = line.strip()
    if line == quit_word:
        return None
    return line


def parse_id(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInput(f"Invalid task id: {raw!r}") from None


def resolve_text(
    args: list[str],
    pos: int,
    message: str,
    prompter: Prompter,
    *,
    quit_word: str = "q",
) -> Provided[str] | Cancelled:
    """Text argument at `pos`, or one line read from the prompter."""
    if pos < len(args):
        return Provided(args[pos])
    line = _ask(prompter, message, quit_word)
    if line is None:
        return Cancelled()
    return Provided(line)


def resolve_id(
    args: list[str],
    pos: int,
    message: str,
    prompter: Prompter,
    *,
    quit_word: str = "q",
    repeat: bool = True,
) -> Provided[int] | Cancelled:
    """
    Task id argument at `pos`, or read from the prompter.

    A non-numeric positional id raises InvalidInput. A non-numeric answer at
    the prompt is asked again while `repeat` is set, otherwise InvalidInput.
    """
    if pos < len(args):
        return Provided(parse_id(args[pos]))

    line = _ask(prompter, message, quit_word)
    while line is not None:
        try:
            return Provided(parse_id(line))
        except InvalidInput:
            if not repeat:
                raise
        line = _ask(prompter, INVALID_ID_PROMPT.format(quit=quit_word), quit_word)
    return Cancelled()
