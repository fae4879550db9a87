"""Terminal prompt renderer used by ``jotl init``."""

from __future__ import annotations

import typer
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jotl.core.application.catalog import SelectionOption, SelectionStep


class TerminalPromptRenderer:
    """Rich/Typer prompts. Ctrl-C or end of input means the user cancelled."""

    def __init__(self, *, console: Console) -> None:
        """Store console dependency.

        Args:
            console: Rich console used for display.
        """
        self._console = console

    def ask_text(self, header: str) -> str | None:
        """Prompt for free text.

        Args:
            header: Question shown above the input.

        Returns:
            Entered text, or None when cancelled.
        """
        self._console.print(
            Panel(Text(header, style="bold"), border_style="cyan", expand=False)
        )
        try:
            return typer.prompt("name")
        except typer.Abort:
            return None

    def select(self, step: SelectionStep) -> SelectionOption | None:
        """Prompt for one of the step options.

        Args:
            step: Selection step descriptor.

        Returns:
            Chosen option, or None when cancelled.
        """
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left")
        table.add_column(style="dim", justify="left")
        for option in step.options:
            table.add_row(option.label, option.description)
        self._console.print(
            Panel(
                Group(Text(step.header, style="bold"), Text(""), table),
                title=step.step_name,
                border_style="cyan",
                expand=False,
            )
        )

        default = None
        if step.default:
            default = next(
                (o.label for o in step.options if o.value == step.default), None
            )
        labels = "/".join(option.label for option in step.options)
        while True:
            try:
                answer = typer.prompt(f"{step.step_name} [{labels}]", default=default)
            except typer.Abort:
                return None
            try:
                return step.option_for(str(answer).strip())
            except KeyError:
                self._console.print(f"Choose one of: {labels}", style="red")
