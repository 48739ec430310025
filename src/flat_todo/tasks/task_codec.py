# src/flat_todo/tasks/task_codec.py

"""
Record codec: one Task <-> one line of JSON.

    {"content": "Fix Issue #4501", "complete": false}

JSON string escaping turns CR/LF into escape sequences, so an encoded record
never contains a line terminator, whatever the task content looks like.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any

from .task_models import DecodeError, Task


def encode_task(task: Task) -> str:
    return json.dumps(
        {"content": task.content, "complete": task.complete},
        ensure_ascii=False,
        separators=(", ", ": "),
    )


def decode_task(line: str, line_num: int | None = None) -> Task:
    """
    Parse one stored line.

    Raises DecodeError for anything that is not a well-formed record; callers
    must not skip such lines.
    """
    raw = line[:-1] if line.endswith("\n") else line
    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON ({exc.msg})", line_num) from exc

    if not isinstance(data, dict):
        raise DecodeError("record is not an object", line_num)

    content = data.get("content")
    complete = data.get("complete")
    if not isinstance(content, str) or not content:
        raise DecodeError("missing or empty 'content'", line_num)
    # bool is checked exactly: 0/1 or "false" are codec mismatches, not flags
    if not isinstance(complete, bool):
        raise DecodeError("missing or non-boolean 'complete'", line_num)

    try:
        return Task(content=content, complete=complete)
    except ValueError as exc:
        # e.g. a "\udcff" escape: valid JSON, not storable text
        raise DecodeError(str(exc), line_num) from exc


def read_records(lines: Iterable[str]) -> Iterator[Task]:
    """Decode a stream of stored lines (e.g. an open text file) lazily, one record at a time."""
    it = iter(lines)
    line_num = 0
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            raise DecodeError(f"not valid UTF-8 ({exc.reason})", line_num + 1) from exc
        line_num += 1
        yield decode_task(line, line_num)
