# src/tasklist/cli/console.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .bootstrap import save_state
from .commands import CommandRegistry, registry

logger = logging.getLogger(__name__)


def _pause() -> None:
    input("\nPress ENTER to continue...")


def run_console_loop(state: AppState, commands: CommandRegistry = registry) -> None:
    """
    Numbered-menu REPL.

    Mutating commands and the exit command rewrite the tasks file right away.
    End of input (EOF / Ctrl+C) leaves the loop and still saves once more.
    StorageError is not handled here; it ends the program.
    """
    logger.info("Console started (tasks=%s total=%d).", state.tasks_path, len(state.store))
    pause = bool(getattr(state.settings, "pause_after_command", True))

    while True:
        try:
            print("\n" + commands.build_menu())
            choice = input("Choose: ")
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed, exiting.")
            print()
            break

        command = commands.get(choice)
        if command is None:
            print("Invalid choice. Try again.")
            continue

        try:
            reply = commands.run(state, command, input)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed during command %s, exiting.", command.key)
            print()
            break

        if command.mutates or command.exits:
            save_state(state)
        print(reply)

        if command.exits:
            logger.info("Console exit command received.")
            return

        if pause:
            try:
                _pause()
            except (EOFError, KeyboardInterrupt):
                logger.info("Console input closed, exiting.")
                print()
                break

    save_state(state)
    logger.info("Console finished, tasks saved to %s.", state.tasks_path)
