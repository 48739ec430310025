# src/flat_todo/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.state import AppState
from .task_models import ListedTask, Task

logger = logging.getLogger(__name__)


def add_task(state: AppState, content: str) -> Task:
    """
    Append a new pending task.
    Uses state.task_store (already constructed in bootstrap).
    """
    # Stored exactly as given; only blank text is refused.
    if not content or not content.strip():
        raise ValueError("content is required")

    task = Task(content=content)
    state.task_store.append(task)
    logger.debug("Task added store=%s chars=%d", state.task_store.path, len(content))
    return task


def list_tasks(state: AppState) -> Iterator[ListedTask]:
    """Pending tasks with their display indices. StoreNotFound if nothing was ever added."""
    return state.task_store.list_pending()


def complete_task(state: AppState, display_index: int) -> Task | None:
    done = state.task_store.complete_by_display_index(display_index)
    if done is None:
        logger.debug("No pending task #%s store=%s", display_index, state.task_store.path)
    else:
        logger.debug("Task #%s completed store=%s", display_index, state.task_store.path)
    return done


def store_summary(state: AppState) -> dict[str, object]:
    pending, completed = state.task_store.count_tasks()
    return {
        "path": state.task_store.path,
        "exists": state.task_store.exists(),
        "pending": pending,
        "completed": completed,
    }
