# tests/test_commands.py

from __future__ import annotations

from pathlib import Path

import pytest

from flat_todo.cli.commands import CommandRegistry, UsageError, registry
from flat_todo.cli.main import main
from flat_todo.tasks.task_models import DecodeError, StoreNotFound, Task


def test_command_registry_routes_names_and_aliases(state) -> None:
    reg = CommandRegistry()
    calls: list[list[str]] = []

    def h(state, args):
        calls.append(args)
        return "ok"

    reg.register("run", h, "run it", aliases=["r"])

    assert reg.handle(state, ["run", "x"]) == "ok"
    assert reg.handle(state, ["R", "y", "z"]) == "ok"
    assert calls == [["x"], ["y", "z"]]
    assert "run - run it" in reg.build_help()


def test_command_registry_unknown_and_empty(state) -> None:
    reg = CommandRegistry()
    with pytest.raises(UsageError, match="Unknown command"):
        reg.handle(state, ["nope"])
    with pytest.raises(UsageError):
        reg.handle(state, [])


def test_registered_commands_against_real_store(state) -> None:
    assert registry.handle(state, ["add", "Get", "groceries"]) == "Added: Get groceries"
    assert registry.handle(state, ["a", "Fix Issue #4501"]) == "Added: Fix Issue #4501"
    assert registry.handle(state, ["list"]) == "1. Get groceries\n2. Fix Issue #4501"

    assert registry.handle(state, ["complete", "1"]) == "Completed: Get groceries"
    assert registry.handle(state, ["done", "7"]) == "No pending task #7."
    assert registry.handle(state, ["ls"]) == "1. Fix Issue #4501"

    status = registry.handle(state, ["status"])
    assert "Pending: 1" in status
    assert "Completed: 1" in status


def test_list_and_complete_propagate_store_errors(state) -> None:
    with pytest.raises(StoreNotFound):
        registry.handle(state, ["list"])
    with pytest.raises(StoreNotFound):
        registry.handle(state, ["complete", "1"])

    state.task_store.path.write_text("corrupt\n", encoding="utf-8")
    with pytest.raises(DecodeError):
        registry.handle(state, ["list"])


def test_add_and_complete_validate_arguments(state) -> None:
    with pytest.raises(UsageError):
        registry.handle(state, ["add"])
    with pytest.raises(UsageError):
        registry.handle(state, ["add", "   "])
    with pytest.raises(UsageError):
        registry.handle(state, ["complete"])
    with pytest.raises(UsageError, match="Not a task number"):
        registry.handle(state, ["complete", "first"])
    assert not state.task_store.exists()


def test_empty_listing_message(state) -> None:
    state.task_store.append(Task("x", complete=True))
    assert registry.handle(state, ["list"]) == "No pending tasks."


def test_main_scenario_and_exit_codes(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert not cli_env.exists()

    assert main(["add", "Get", "groceries"]) == 0
    assert main(["add", "Fix Issue #4501"]) == 0
    assert main(["add", "Add more features"]) == 0
    capsys.readouterr()

    assert main(["complete", "1"]) == 0
    assert capsys.readouterr().out == "Completed: Get groceries\n"

    assert main(["add", "Update readme file"]) == 0
    capsys.readouterr()

    assert main(["list"]) == 0
    assert capsys.readouterr().out == (
        "1. Fix Issue #4501\n2. Add more features\n3. Update readme file\n"
    )
    assert len(cli_env.read_text("utf-8").splitlines()) == 4


def test_main_usage_errors(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert main(["frobnicate"]) == 1
    assert main(["complete", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown command: frobnicate" in captured.err

    assert main(["help"]) == 0
    assert "complete" in capsys.readouterr().out


def test_main_reports_corrupt_store(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli_env.parent.mkdir(parents=True)
    cli_env.write_text('{"content": "a", "complete": false}\n{broken\n', encoding="utf-8")

    assert main(["list"]) == 1
    captured = capsys.readouterr()
    # no partial listing on stdout
    assert captured.out == ""
    assert "line 2" in captured.err


def test_add_stores_content_as_given(state) -> None:
    assert registry.handle(state, ["add", "  padded ", "text  "]) == "Added:   padded  text  "
    assert list(state.task_store.iter_tasks()) == [Task("  padded  text  ")]


def test_main_rejects_undecodable_argv(cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["add", "bad \udcff byte"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot add task" in captured.err
    assert not cli_env.exists()
