# src/flat_todo/tasks/task_reader.py

"""
Renumbering reader.

Display indices are never stored. They are derived on every walk: a counter
starts at 1 and advances only on pending records, so the pending tasks of any
store state are always numbered 1..K in file order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import ListedTask, Task


def number_pending(tasks: Iterable[Task]) -> Iterator[tuple[int | None, Task]]:
    """Yield (display_index, task) for every record; completed records get None."""
    counter = 1
    for task in tasks:
        if task.complete:
            yield None, task
            continue
        yield counter, task
        counter += 1


def iter_pending(tasks: Iterable[Task]) -> Iterator[ListedTask]:
    for index, task in number_pending(tasks):
        if index is not None:
            yield ListedTask(index, task.content)
