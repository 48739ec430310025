# src/flat_todo/tasks/task_compactor.py

"""
Compaction: rewrite the whole record sequence into a side file, then swap it in.

The store is append-only, so the only way to change an existing record is to
stream every record through a transform into a temporary file in the same
directory and `os.replace` it over the original. The rename is the single
commit point: before it the original is untouched, after it the rewrite is
complete. The temporary file is removed on every failure path.

No locking: two processes compacting (or appending to) the same store at once
can lose writes.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from pathlib import Path

from .task_codec import encode_task, read_records
from .task_models import StoreError, StoreIOError, StoreNotFound, Task
from .task_reader import number_pending

RecordTransform = Callable[[Iterator[Task]], Iterable[Task]]


def rewrite_store(path: Path, transform: RecordTransform) -> None:
    """Stream every record of `path` through `transform` and atomically replace the file."""
    try:
        src = open(path, encoding="utf-8", newline="\n")
    except FileNotFoundError as exc:
        raise StoreNotFound(path) from exc
    except OSError as exc:
        raise StoreIOError(f"cannot open task store {path}: {exc}") from exc

    tmp_path: Path | None = None
    replaced = False
    try:
        with src, tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as dst:
            tmp_path = Path(dst.name)
            for task in transform(read_records(src)):
                dst.write(encode_task(task) + "\n")
            dst.flush()
            os.fsync(dst.fileno())
        # NamedTemporaryFile is created 0600; keep the store's own permissions.
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
        replaced = True
    except StoreError:
        raise
    except OSError as exc:
        raise StoreIOError(f"cannot rewrite task store {path}: {exc}") from exc
    finally:
        if tmp_path is not None and not replaced:
            with contextlib.suppress(OSError):
                tmp_path.unlink()


def complete_at(path: Path, target: int) -> Task | None:
    """
    Mark the pending task with display index `target` complete.

    Returns the flipped task, or None when `target` matched nothing
    (<= 0, past the last pending task, or no pending tasks). The file is
    rewritten either way.
    """
    matched: list[Task] = []

    def flip(tasks: Iterator[Task]) -> Iterator[Task]:
        for index, task in number_pending(tasks):
            if index == target:
                task = replace(task, complete=True)
                matched.append(task)
            yield task

    rewrite_store(path, flip)
    return matched[0] if matched else None
