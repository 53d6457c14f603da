# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list into AppState, then runs the
console menu in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.console import run_console_loop
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import StorageError

logger = logging.getLogger(__name__)


def console_level_from_name(name: str) -> int:
    """Map a level name like "debug" to its number; unknown names give WARNING."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def main() -> None:
    settings = get_settings()

    console_level = console_level_from_name(getattr(settings, "log_level", "WARNING"))

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
        run_console_loop(state)
    except StorageError as e:
        logger.critical("Storage failure on %s: %s", e.path, e)
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    logger.info("Bye.")


if __name__ == "__main__":
    main()
