# src/flat_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API and CLI.

They depend on this Protocol instead of the concrete flat-file store, which
keeps the storage swappable and makes testing easier.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any, Protocol


class TaskRepo(Protocol):
    @property
    def path(self) -> Path: ...

    def exists(self) -> bool: ...

    # add / list / complete
    def append(self, task: Any) -> None: ...
    def list_pending(self) -> Iterator[Any]: ...
    def complete_by_display_index(self, target: int) -> Any | None: ...

    # diagnostics
    def iter_tasks(self) -> Iterator[Any]: ...
    def count_tasks(self) -> tuple[int, int]: ...
