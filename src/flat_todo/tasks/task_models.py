# src/flat_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    There is no id: a task is identified by its line position in the store,
    and that position is never shown to the user.
    """

    content: str
    complete: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.content, str) or not self.content:
            raise ValueError("content is required")
        # Lone surrogates (e.g. undecodable argv bytes on POSIX) cannot be stored as UTF-8.
        try:
            self.content.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"content is not valid text: {exc.reason}") from None


class ListedTask(NamedTuple):
    """A pending task together with its display index (1-based, ephemeral)."""

    index: int
    content: str


# ---- errors ----


class StoreError(Exception):
    """Base class for every failure raised by the task store."""


class StoreNotFound(StoreError, FileNotFoundError):
    """Read or completion attempted against a store file that does not exist."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"No task store at {path}. Add a task first.")


class DecodeError(StoreError, ValueError):
    """A stored line cannot be parsed back into a Task."""

    def __init__(self, message: str, line_num: int | None = None) -> None:
        self.line_num = line_num
        if line_num is not None:
            message = f"line {line_num}: {message}"
        super().__init__(message)


class StoreIOError(StoreError, OSError):
    """Open, read, write or rename failure at the filesystem boundary."""
