# src/flat_todo/tasks/task_store.py

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .task_codec import encode_task, read_records
from .task_compactor import complete_at
from .task_models import ListedTask, StoreIOError, StoreNotFound, Task
from .task_reader import iter_pending

DEFAULT_STORE_NAME = "tasks.jsonl"


class TaskStore:
    """
    Flat-file task store (one JSON record per line).

    - add: a single append, creating the file on first use
    - list: streamed, pending tasks renumbered 1..K on every read
    - complete: full rewrite into a side file + atomic rename

    Each method opens and closes its own file handles; nothing is held
    between calls. The store never prints or logs: every failure is raised
    as a StoreError subclass for the caller to report.
    """

    def __init__(self, path: str | Path = DEFAULT_STORE_NAME) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"TaskStore({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        # A directory in the store's place "exists": reading it fails with StoreIOError.
        return self._path.exists()

    # ---- low-level helpers ----

    def _require_store(self) -> None:
        if not self.exists():
            raise StoreNotFound(self._path)

    def _read(self) -> Iterator[Task]:
        try:
            with open(self._path, encoding="utf-8", newline="\n") as fh:
                yield from read_records(fh)
        except FileNotFoundError as exc:
            raise StoreNotFound(self._path) from exc
        except OSError as exc:
            raise StoreIOError(f"cannot read task store {self._path}: {exc}") from exc

    # ---- public API ----

    def append(self, task: Task) -> None:
        data = (encode_task(task) + "\n").encode("utf-8")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "ab+") as fh:
                # A last record without its terminator still decodes; keep it a line of its own.
                if fh.seek(0, os.SEEK_END) > 0:
                    fh.seek(-1, os.SEEK_END)
                    if fh.read(1) != b"\n":
                        data = b"\n" + data
                fh.write(data)
        except OSError as exc:
            raise StoreIOError(f"cannot append to task store {self._path}: {exc}") from exc

    def iter_tasks(self) -> Iterator[Task]:
        """
        Every record in file order, pending and completed.

        Raises StoreNotFound immediately; decoding happens lazily and a corrupt
        line raises DecodeError from the iterator.
        """
        self._require_store()
        return self._read()

    def list_pending(self) -> Iterator[ListedTask]:
        """
        Pending tasks as (display_index, content), numbered 1..K in file order.

        The iterator is single-pass and holds the file open until it is
        exhausted, fails, or is closed.
        """
        self._require_store()
        return iter_pending(self._read())

    def complete_by_display_index(self, target: int) -> Task | None:
        """
        Flag the `target`-th pending task (as numbered by list_pending) complete.

        Returns the completed task, or None if no pending task has that index.
        """
        self._require_store()
        return complete_at(self._path, target)

    def count_tasks(self) -> tuple[int, int]:
        """(pending, completed) record counts; (0, 0) when the store does not exist yet."""
        if not self.exists():
            return 0, 0
        pending = completed = 0
        for task in self._read():
            if task.complete:
                completed += 1
            else:
                pending += 1
        return pending, completed
