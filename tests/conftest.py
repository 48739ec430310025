# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from flat_todo.core.state import AppState
from flat_todo.tasks.task_codec import encode_task
from flat_todo.tasks.task_models import Task
from flat_todo.tasks.task_store import TaskStore


def write_records(path: Path, tasks: Iterable[Task]) -> None:
    """Write a store file directly, bypassing TaskStore."""
    path.write_text("".join(encode_task(t) + "\n" for t in tasks), encoding="utf-8")


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="flat-todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        store_path=tmp_path / "tasks.jsonl",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.store_path)


@pytest.fixture()
def seed(store: TaskStore) -> Callable[..., Path]:
    """seed(Task(...), ...) writes those records as the store file and returns its path."""

    def _seed(*tasks: Task) -> Path:
        write_records(store.path, tasks)
        return store.path

    return _seed


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    # Real flat-file store: its behaviour is what the CLI tests exercise.
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point the CLI at a temporary store and undo its logging setup afterwards.

    Yields the store path.
    """
    store_path = tmp_path / "cli" / "tasks.jsonl"
    monkeypatch.setenv("FLAT_TODO_STORE_PATH", str(store_path))
    monkeypatch.setenv("FLAT_TODO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("FLAT_TODO_LOG_TO_FILE", "0")
    monkeypatch.setenv("FLAT_TODO_LOG_LEVEL", "WARNING")

    yield store_path

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    logging.captureWarnings(False)
