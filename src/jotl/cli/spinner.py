"""Spinner shown while the project is provisioned."""

from __future__ import annotations

from threading import Event

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner


class RichSpinner:
    """Transient rich spinner, rendered until its stop event is set."""

    def __init__(
        self, console: Console, message: str = "Creating your Jotl project..."
    ) -> None:
        self._console = console
        self._message = message

    def run(self, stop: Event) -> None:
        with Live(
            Spinner("dots", text=self._message, style="cyan"),
            console=self._console,
            transient=True,
            refresh_per_second=12,
        ):
            stop.wait()

    def release_terminal(self) -> None:
        self._console.show_cursor(True)
