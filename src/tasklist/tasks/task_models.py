# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

# Longest title kept in memory and on disk (characters).
TITLE_MAX = 127


@dataclass(slots=True)
class Task:
    id: int
    title: str
    done: bool = False

    @property
    def status_mark(self) -> str:
        return "[x]" if self.done else "[ ]"


@dataclass(frozen=True, slots=True)
class TaskStats:
    """
    Counters shown by the Stats command.

    pending is derived, so done + pending == total always holds.
    """

    total: int
    done: int

    @property
    def pending(self) -> int:
        return self.total - self.done


# Field separator of the tasks file; never allowed inside a title.
FIELD_DELIMITER = ","
DELIMITER_SUBSTITUTE = ";"


def sanitize_title(title: str) -> str:
    """
    Make a title safe for one line of the tasks file.

    The field delimiter becomes DELIMITER_SUBSTITUTE, line breaks become a space,
    and the result is cut down to TITLE_MAX.
    """
    title = title.replace(FIELD_DELIMITER, DELIMITER_SUBSTITUTE)
    title = title.replace("\r", " ").replace("\n", " ")
    return title[:TITLE_MAX]
