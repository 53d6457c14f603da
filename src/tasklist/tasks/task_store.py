# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import TaskNotFoundError, UserInputError
from .task_models import Task, TaskStats, sanitize_title

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task list.

    Ordering and ids:
    - tasks keep insertion order; delete closes the gap without renumbering
    - a new id is max(existing ids) + 1, so ids of deleted tasks are never reused
    - tasks passed to the constructor are kept verbatim (duplicate ids included)

    Every failing operation raises before touching the list, so the store is
    left unchanged.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- queries ----

    def next_id(self) -> int:
        return max((t.id for t in self._tasks), default=0) + 1

    def list_tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def find_by_id(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def search(self, query: str) -> list[Task]:
        """Case-sensitive substring match on titles, in store order."""
        if not query:
            raise UserInputError("Search text cannot be empty.")
        return [t for t in self._tasks if query in t.title]

    def stats(self) -> TaskStats:
        done = sum(1 for t in self._tasks if t.done)
        return TaskStats(total=len(self._tasks), done=done)

    # ---- mutations ----

    def add(self, title: str) -> Task:
        title = title.rstrip()
        if not title:
            raise UserInputError("Title cannot be empty.")

        task = Task(id=self.next_id(), title=sanitize_title(title))
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def mark_done(self, task_id: int) -> Task:
        task = self.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.done = True
        logger.debug("Task marked done id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[idx]
                logger.debug("Task deleted id=%s", task_id)
                return task
        raise TaskNotFoundError(task_id)
