# src/flat_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import add_task, complete_task, list_tasks, store_summary

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Bad command line: unknown command, missing or malformed arguments."""


class CommandRegistry:
    """Simple subcommand registry used by the CLI entrypoint (add, list, complete, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run a command line such as ["complete", "2"].
        Returns the reply text; raises UsageError or a StoreError.
        """
        if not argv:
            raise UsageError("No command given. Use 'help' to list available commands.")

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            raise UsageError(f"Unknown command: {name}. Use 'help' to list available commands.")

        logger.debug("Dispatching command=%s args=%d", name, len(args))
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    content = " ".join(args)
    if not content.strip():
        raise UsageError("Usage: add <task text>")
    try:
        task = add_task(state, content)
    except ValueError as exc:
        raise UsageError(f"Cannot add task: {exc}") from None
    return f"Added: {task.content}"


def cmd_list(state: AppState, args: list[str]) -> str:
    # Render everything before returning: a corrupt line must not leave a
    # partial listing on stdout.
    lines = [f"{item.index}. {item.content}" for item in list_tasks(state)]
    if not lines:
        return "No pending tasks."
    return "\n".join(lines)


def cmd_complete(state: AppState, args: list[str]) -> str:
    """
    complete <n>  -> mark the n-th task of the last listing done
    """
    if len(args) != 1:
        raise UsageError("Usage: complete <number>")
    try:
        display_index = int(args[0])
    except ValueError:
        raise UsageError(f"Not a task number: {args[0]!r}") from None

    done = complete_task(state, display_index)
    if done is None:
        return f"No pending task #{display_index}."
    return f"Completed: {done.content}"


def cmd_status(state: AppState, args: list[str]) -> str:
    info = store_summary(state)
    where = str(info["path"]) + ("" if info["exists"] else " (not created yet)")
    return (
        "Status:\n"
        f"  Store: {where}\n"
        f"  Pending: {info['pending']}\n"
        f"  Completed: {info['completed']}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: add <task text>.", aliases=["a"])
registry.register("list", cmd_list, help_text="List pending tasks.", aliases=["ls", "l"])
registry.register(
    "complete",
    cmd_complete,
    help_text="Mark a task done by its number in 'list': complete <number>.",
    aliases=["done", "c"],
)
registry.register("status", cmd_status, help_text="Show store path and task counts.")
