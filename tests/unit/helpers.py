"""Test doubles shared by unit and integration tests. Not part of the jotl API."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path
from threading import Event

from jotl.core.application.catalog import SelectionOption, SelectionStep


class FakeRenderer:
    """Prompt renderer answering from canned values; None means cancel."""

    def __init__(
        self,
        *,
        name: str | None = "demo",
        selections: dict[str, str | None] | None = None,
    ) -> None:
        self.name = name
        self.selections = selections or {}
        self.text_prompts: list[str] = []
        self.selection_prompts: list[str] = []

    def ask_text(self, header: str) -> str | None:
        self.text_prompts.append(header)
        return self.name

    def select(self, step: SelectionStep) -> SelectionOption | None:
        self.selection_prompts.append(step.step_name)
        label = self.selections.get(step.step_name, step.options[0].label)
        if label is None:
            return None
        return step.option_for(label)

    @property
    def prompt_count(self) -> int:
        return len(self.text_prompts) + len(self.selection_prompts)


class FakeRunner:
    """Subprocess runner recording argv; ``git init`` creates a ``.git`` dir."""

    def __init__(self, returncodes: dict[tuple[str, ...], int] | None = None) -> None:
        self.returncodes = returncodes or {}
        self.calls: list[tuple[list[str], Path | None]] = []

    def __call__(
        self,
        argv: Sequence[str],
        *,
        cwd: str | Path | None = None,
        env: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> subprocess.CompletedProcess[str]:
        del env, timeout
        args = list(argv)
        self.calls.append((args, Path(cwd) if cwd is not None else None))
        returncode = 0
        for prefix, code in self.returncodes.items():
            if tuple(args[: len(prefix)]) == prefix:
                returncode = code
        if args[:2] == ["git", "init"] and returncode == 0 and cwd is not None:
            (Path(cwd) / ".git").mkdir(exist_ok=True)
        return subprocess.CompletedProcess(args, returncode, stdout="", stderr="")

    def argvs(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


class CountingIndicator:
    """Progress indicator counting terminal releases."""

    def __init__(self) -> None:
        self.started = Event()
        self.finished = Event()
        self.release_calls = 0
        self.finished_before_release: bool | None = None

    def run(self, stop: Event) -> None:
        self.started.set()
        stop.wait()
        self.finished.set()

    def release_terminal(self) -> None:
        self.release_calls += 1
        self.finished_before_release = self.finished.is_set()
