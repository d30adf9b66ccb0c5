# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..core.state import AppState
from ..errors import InvalidInput
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_ops import add_task, delete_task, list_tasks, update_description, update_status
from .prompts import Cancelled, resolve_id, resolve_text

CommandHandler = Callable[[AppState, list[str]], int]

EXIT_OK = 0
EXIT_ERROR = 1

TS_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command-name -> handler table. One command runs per invocation."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        self._help[name] = (usage or name, help_text)
        for alias in aliases:
            self._handlers[alias] = handler

    def handle(self, state: AppState, argv: list[str]) -> int:
        """
        Run the command named by argv[0] with the remaining arguments.

        No arguments prints the help text. Returns the process exit code;
        task errors propagate to the caller.
        """
        if not argv:
            print(self.build_help(_app_name(state)))
            return EXIT_OK

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            print(f"Unknown command: {name}", file=sys.stderr)
            print(self.build_help(_app_name(state)))
            return EXIT_ERROR

        logger.debug("Running command %s args=%s", name, args)
        return handler(state, args)

    def build_help(self, app_name: str = "task-cli") -> str:
        lines = [f"Usage: {app_name} <command> [arguments]", "", "Available commands:"]
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        for usage, help_text in self._help.values():
            lines.append(f"  {usage:<{width}}  {help_text}")
        lines.append("")
        lines.append("New tasks start as 'todo'. Missing arguments are asked for interactively.")
        return "\n".join(lines)


registry = CommandRegistry()


def _app_name(state: AppState) -> str:
    return str(getattr(state.settings, "app_name", "task-cli"))


def _quit_word(state: AppState) -> str:
    return str(getattr(state.settings, "quit_word", "q"))


def _id_prompt(state: AppState) -> str:
    return f"Enter task id ['{_quit_word(state)}' for exit]:"


def _require_description(raw: str) -> str:
    if not raw.strip():
        raise InvalidInput("Task description must not be empty")
    return raw


def _nothing_to_do(tasks: list[Task]) -> bool:
    if tasks:
        return False
    print("No tasks, nothing to do")
    return True


def format_task(task: Task) -> str:
    return (
        f"{task.id} {task.description} {task.status.label} "
        f"{task.created_at.strftime(TS_FORMAT)} {task.updated_at.strftime(TS_FORMAT)}"
    )


def cmd_help(state: AppState, args: list[str]) -> int:
    print(registry.build_help(_app_name(state)))
    return EXIT_OK


def cmd_add(state: AppState, args: list[str]) -> int:
    tasks = state.store.load()
    name = resolve_text(
        args, 0, "Enter the task name:", state.prompter, quit_word=_quit_word(state)
    )
    if isinstance(name, Cancelled):
        return EXIT_OK

    tasks, task = add_task(tasks, _require_description(name.value))
    state.store.save(tasks)
    print(f"Task added successfully (ID: {task.id})")
    return EXIT_OK


def cmd_update(state: AppState, args: list[str]) -> int:
    tasks = state.store.load()
    if _nothing_to_do(tasks):
        return EXIT_OK

    quit_word = _quit_word(state)
    task_id = resolve_id(args, 0, _id_prompt(state), state.prompter, quit_word=quit_word)
    if isinstance(task_id, Cancelled):
        return EXIT_OK
    desc = resolve_text(
        args,
        1,
        f"Enter task description ['{quit_word}' for exit]:",
        state.prompter,
        quit_word=quit_word,
    )
    if isinstance(desc, Cancelled):
        return EXIT_OK

    update_description(tasks, task_id.value, _require_description(desc.value))
    state.store.save(tasks)
    print(f"Task {task_id.value} updated")
    return EXIT_OK


def _make_mark_command(status: TaskStatus) -> CommandHandler:
    def cmd_mark(state: AppState, args: list[str]) -> int:
        tasks = state.store.load()
        if _nothing_to_do(tasks):
            return EXIT_OK

        task_id = resolve_id(
            args, 0, _id_prompt(state), state.prompter, quit_word=_quit_word(state)
        )
        if isinstance(task_id, Cancelled):
            return EXIT_OK

        update_status(tasks, task_id.value, status)
        state.store.save(tasks)
        print(f"Task {task_id.value} marked as {status.label}")
        return EXIT_OK

    return cmd_mark


def cmd_delete(state: AppState, args: list[str]) -> int:
    tasks = state.store.load()
    if _nothing_to_do(tasks):
        return EXIT_OK

    task_id = resolve_id(args, 0, _id_prompt(state), state.prompter, quit_word=_quit_word(state))
    if isinstance(task_id, Cancelled):
        return EXIT_OK

    tasks = delete_task(tasks, task_id.value)
    state.store.save(tasks)
    print(f"Task {task_id.value} deleted")
    return EXIT_OK


def cmd_list(state: AppState, args: list[str]) -> int:
    """
    list          -> all tasks
    list <status> -> only tasks with that status (todo | in-progress | done)
    """
    status: TaskStatus | None = None
    if args:
        try:
            status = TaskStatus.from_label(args[0])
        except ValueError:
            raise InvalidInput(
                f"Unknown status {args[0]!r}; expected one of: {', '.join(TaskStatus.labels())}"
            ) from None

    tasks = state.store.load()
    for task in list_tasks(tasks, status):
        print(format_task(task))
    return EXIT_OK


registry.register("add", cmd_add, "create a new task", usage="add [task name]")
registry.register(
    "update", cmd_update, "change a task's description", usage="update [task id] [new task name]"
)
registry.register("delete", cmd_delete, "delete a task", usage="delete [task id]")
registry.register(
    "mark-in-progress",
    _make_mark_command(TaskStatus.IN_PROGRESS),
    'set the task status to "in-progress"',
    usage="mark-in-progress [task id]",
)
registry.register(
    "mark-done",
    _make_mark_command(TaskStatus.DONE),
    'set the task status to "done"',
    usage="mark-done [task id]",
)
registry.register(
    "list",
    cmd_list,
    "show tasks, optionally only those with a status",
    usage="list [todo|in-progress|done]",
)
registry.register("help", cmd_help, "show this help", aliases=["-h", "--help"])
