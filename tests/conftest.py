# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and of any local .env file.
    """
    return SimpleNamespace(
        app_name="tasklist",
        log_level="WARNING",
        log_to_file=False,
        pause_after_command=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.csv",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def scripted_input(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[str]]:
    """
    Replace builtins.input with a fixed script of answers.

    Once the script runs out, input() raises EOFError like a closed stdin.
    on_prompt, if given, is called with each prompt before it is answered.
    Returns the list of prompts that were shown.
    """

    def install(*answers: str, on_prompt: Callable[[str], None] | None = None) -> list[str]:
        remaining = list(answers)
        prompts: list[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if on_prompt is not None:
                on_prompt(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return install
