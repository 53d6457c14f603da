# tasks/task_codec.py

"""
Plain-text persistence for TaskStore.

One task per line:

    <id>,<title>,<done>

- done is written as 1 or 0
- titles never contain a comma (TaskStore.add swaps it for ';')
- the whole file is rewritten on every save

Loading is lenient: a missing file is an empty store, and lines that do not
carry three fields are skipped without complaint.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import StorageReadError, StorageWriteError
from .task_models import FIELD_DELIMITER, TITLE_MAX, Task, sanitize_title
from .task_store import TaskStore

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DIGITS = "0123456789"


def scan_int(text: str) -> int | None:
    """
    Parse a leading decimal integer the way strtol does.

    Leading whitespace and one sign are allowed, parsing stops at the first
    non-digit. Returns None when no digit was found. The value is clamped to
    the 32-bit signed range.
    """
    # Same set as C isspace(); Unicode spaces are not skipped.
    s = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if s[:1] in ("+", "-"):
        if s[0] == "-":
            sign = -1
        s = s[1:]

    end = 0
    while end < len(s) and s[end] in _DIGITS:
        end += 1
    if end == 0:
        return None

    digits = s[:end].lstrip("0") or "0"
    # Anything past 10 digits is out of range anyway; int() also caps string length.
    if len(digits) > 10:
        return INT32_MAX if sign > 0 else INT32_MIN

    value = sign * int(digits)
    return max(INT32_MIN, min(INT32_MAX, value))


def saturating_int(text: str) -> int:
    """Like scan_int, but 0 when there is nothing to parse. Never raises."""
    value = scan_int(text)
    return 0 if value is None else value


def encode_task(task: Task) -> str:
    done = 1 if task.done else 0
    title = sanitize_title(task.title)
    return f"{task.id}{FIELD_DELIMITER}{title}{FIELD_DELIMITER}{done}\n"


def decode_line(line: str) -> Task | None:
    """
    Decode one stored line, or None if the line is blank or corrupt.

    Empty pieces are dropped before counting fields, so "1,,0" only has two
    fields and is rejected. Anything after the third field is ignored.
    """
    line = line.rstrip("\r\n")
    if not line:
        return None

    fields = [f for f in line.split(FIELD_DELIMITER) if f]
    if len(fields) < 3:
        return None

    raw_id, title, raw_done = fields[:3]
    return Task(
        id=saturating_int(raw_id),
        title=title[:TITLE_MAX],
        done=saturating_int(raw_done) != 0,
    )


def load_tasks(path: str | Path) -> TaskStore:
    path = Path(path)
    if not path.exists():
        logger.info("No tasks file at %s, starting empty.", path)
        return TaskStore()

    tasks: list[Task] = []
    skipped = 0
    try:
        with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
            for lineno, line in enumerate(f, start=1):
                task = decode_line(line)
                if task is None:
                    if line.strip():
                        skipped += 1
                        logger.debug("Skipping corrupt line %s:%d: %r", path, lineno, line)
                    continue
                tasks.append(task)
    except OSError as e:
        raise StorageReadError(f"Cannot read tasks file {path}: {e}", path) from e

    logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), path, skipped)
    return TaskStore(tasks)


def save_tasks(store: TaskStore, path: str | Path) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for task in store:
                f.write(encode_task(task))
    except OSError as e:
        raise StorageWriteError(f"Cannot open tasks file for writing: {path} ({e})", path) from e

    logger.debug("Saved %d tasks to %s", len(store), path)
