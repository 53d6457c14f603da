# tests/test_console.py

from __future__ import annotations

import pytest

from tasklist.cli.console import run_console_loop
from tasklist.tasks.errors import StorageWriteError


def test_add_list_and_exit(state, scripted_input, capsys) -> None:
    scripted_input("2", "Buy milk, eggs", "1", "7")

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "==== To-Do CLI ====" in out
    assert "Added task #1." in out
    assert "1    [ ]     Buy milk; eggs" in out
    assert f"Saved to {state.tasks_path}. Goodbye!" in out
    assert state.tasks_path.read_text("utf-8") == "1,Buy milk; eggs,0\n"


def test_mutation_is_saved_immediately(state, scripted_input) -> None:
    saved: list[str] = []

    def snapshot(prompt: str) -> None:
        # The file is checked each time the loop asks for the next menu choice.
        if prompt == "Choose: " and state.tasks_path.exists():
            saved.append(state.tasks_path.read_text("utf-8"))

    scripted_input("2", "first", "2", "second", "3", "1", on_prompt=snapshot)

    run_console_loop(state)

    assert saved == [
        "1,first,0\n",
        "1,first,0\n2,second,0\n",
        "1,first,1\n2,second,0\n",
    ]


def test_eof_performs_final_save(state, scripted_input, capsys) -> None:
    scripted_input("2", "write tests")

    run_console_loop(state)

    assert state.tasks_path.read_text("utf-8") == "1,write tests,0\n"
    assert "Goodbye" not in capsys.readouterr().out


def test_eof_inside_command_still_saves(state, scripted_input) -> None:
    state.store.add("existing")
    scripted_input("2")

    run_console_loop(state)

    assert state.tasks_path.read_text("utf-8") == "1,existing,0\n"


def test_errors_do_not_stop_the_loop(state, scripted_input, capsys) -> None:
    scripted_input("9", "2", "", "3", "5", "4", "abc", "5", "", "6", "7")

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Invalid choice. Try again." in out
    assert "Title cannot be empty." in out
    assert "No task with ID 5." in out
    assert "Please enter a numeric task ID." in out
    assert "Search text cannot be empty." in out
    assert "Total: 0, Done: 0, Pending: 0" in out
    assert state.tasks_path.read_text("utf-8") == ""


def test_pause_after_command(state, scripted_input) -> None:
    state.settings.pause_after_command = True
    prompts = scripted_input("6", "", "7")

    run_console_loop(state)

    assert prompts == ["Choose: ", "\nPress ENTER to continue...", "Choose: "]


def test_search_from_menu(state, scripted_input, capsys) -> None:
    state.store.add("Buy milk")
    state.store.add("buy bread")
    scripted_input("5", "Buy", "7")

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Results for 'Buy':" in out
    assert "1    [ ]     Buy milk" in out
    assert "buy bread" not in out


def test_write_failure_escapes_the_loop(state, scripted_input, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    state.tasks_path = blocker / "tasks.csv"
    scripted_input("2", "doomed")

    with pytest.raises(StorageWriteError):
        run_console_loop(state)
