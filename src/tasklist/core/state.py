# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a command handler needs, owned by the entrypoint and passed down.

    settings is typed loosely so tests can pass a SimpleNamespace.
    """

    settings: Any
    store: TaskStore
    tasks_path: Path
