# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.errors import StorageError, TaskNotFoundError, UserInputError
from ..tasks.task_codec import scan_int
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
CommandHandler = Callable[[AppState, Prompt], str]

logger = logging.getLogger(__name__)

MENU_TITLE = "To-Do CLI"


@dataclass(frozen=True, slots=True)
class Command:
    key: str
    label: str
    handler: CommandHandler
    mutates: bool = False
    exits: bool = False


class CommandRegistry:
    """Numbered menu entries used by the console loop (1 = List, 2 = Add, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        label: str,
        *,
        mutates: bool = False,
        exits: bool = False,
    ) -> None:
        self._commands[key] = Command(
            key=key, label=label, handler=handler, mutates=mutates, exits=exits
        )

    def get(self, choice: str) -> Command | None:
        return self._commands.get(choice.strip())

    def run(self, state: AppState, command: Command, prompt: Prompt) -> str:
        """
        Run one command and return the text to show.

        Bad input and unknown ids become a message and the store stays as it was.
        Storage failures and end-of-input are re-raised for the console loop.
        """
        try:
            return command.handler(state, prompt)
        except (UserInputError, TaskNotFoundError) as e:
            logger.debug("Command %s rejected: %s", command.key, e)
            return str(e)
        except (StorageError, EOFError):
            raise
        except Exception:
            logger.exception("Command handler crashed (choice=%s).", command.key)
            return "Internal error while handling a command."

    def build_menu(self) -> str:
        lines = [f"==== {MENU_TITLE} ===="]
        for key, command in self._commands.items():
            lines.append(f"{key}) {command.label}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int:
    value = scan_int(raw)
    if value is None:
        raise UserInputError("Please enter a numeric task ID.")
    return value


def format_task_row(task: Task) -> str:
    return f"{task.id:<4} {task.status_mark:<7} {task.title}"


def format_task_table(tasks: Iterable[Task]) -> str:
    lines = ["ID   Status  Title", "-" * 40]
    lines.extend(format_task_row(t) for t in tasks)
    return "\n".join(lines)


def cmd_list(state: AppState, prompt: Prompt) -> str:
    tasks = state.store.list_tasks()
    if not tasks:
        return "No tasks yet. Add one!"
    return "\n" + format_task_table(tasks)


def cmd_add(state: AppState, prompt: Prompt) -> str:
    title = prompt("Enter task title: ")
    task = state.store.add(title)
    return f"Added task #{task.id}."


def cmd_mark_done(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Enter task ID to mark done: "))
    state.store.mark_done(task_id)
    return f"Marked task #{task_id} as done."


def cmd_delete(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Enter task ID to delete: "))
    state.store.delete(task_id)
    return f"Deleted task #{task_id}."


def cmd_search(state: AppState, prompt: Prompt) -> str:
    query = prompt("Enter search text: ").rstrip("\r\n")
    matches = state.store.search(query)
    lines = [f"\nResults for '{query}':"]
    if matches:
        lines.extend(format_task_row(t) for t in matches)
    else:
        lines.append("No matching tasks.")
    return "\n".join(lines)


def cmd_stats(state: AppState, prompt: Prompt) -> str:
    s = state.store.stats()
    return f"Total: {s.total}, Done: {s.done}, Pending: {s.pending}"


def cmd_exit(state: AppState, prompt: Prompt) -> str:
    return f"Saved to {state.tasks_path}. Goodbye!"


registry.register("1", cmd_list, "List tasks")
registry.register("2", cmd_add, "Add task", mutates=True)
registry.register("3", cmd_mark_done, "Mark task as done", mutates=True)
registry.register("4", cmd_delete, "Delete task", mutates=True)
registry.register("5", cmd_search, "Search tasks")
registry.register("6", cmd_stats, "Stats")
registry.register("7", cmd_exit, "Save & Exit", exits=True)
