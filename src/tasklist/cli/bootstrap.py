# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the persisted task list,
- wires everything into AppState,
- writes the task list back to disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_codec import load_tasks, save_tasks

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises StorageReadError if an existing tasks file cannot be read.
    """
    if settings is None:
        settings = get_settings()

    tasks_path = Path(settings.tasks_path)
    store = load_tasks(tasks_path)
    logger.info("Task list ready path=%s total=%d", tasks_path, len(store))

    return AppState(settings=settings, store=store, tasks_path=tasks_path)


def save_state(state: AppState) -> None:
    """Rewrite the tasks file. StorageWriteError propagates to the caller."""
    save_tasks(state.store, state.tasks_path)
