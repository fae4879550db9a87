"""Typer CLI entrypoint for jotl."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from jotl import __version__
from jotl.cli.prompts import TerminalPromptRenderer
from jotl.cli.spinner import RichSpinner
from jotl.config import JotlSettings, SettingsError, load_settings
from jotl.core.application.commands import ExitCode, InitCommand
from jotl.core.models.project import LogLevel, ProjectConfiguration, StorageDriver

LOGO = r"""
    ___      ___    ___      ___
   /\  \    /\  \  /\  \    /\__\
  _\:\  \  /::\  \ \:\  \  /:/  /
 /\/::\__\/:/\:\__\/::\__\/:/__/
 \::/\/__/\:\/:/  /:/\/__/\:\  \
  \/__/    \::/  /\/__/    \:\__\
            \/__/           \/__/
"""
LOGO_STYLE = "bold #01FAC6"
TIP_STYLE = "italic color(190)"

app = typer.Typer(
    name="jotl",
    help="Jotl: scaffold log management projects backed by SQLite or Postgres.",
    add_completion=False,
)
_CONSOLE = Console()
_LOGGING_CONFIGURED = False


def _configure_logging(verbose: bool) -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if not _LOGGING_CONFIGURED:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        )
        _LOGGING_CONFIGURED = True
    logging.getLogger("jotl").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _build_init_command(settings: JotlSettings) -> InitCommand:
    """Wire the init command to the terminal.

    Args:
        settings: Loaded tool settings.

    Returns:
        Init command using terminal prompts and a rich spinner.
    """
    return InitCommand(
        renderer=TerminalPromptRenderer(console=_CONSOLE),
        indicator_factory=lambda: RichSpinner(_CONSOLE),
        settings=settings,
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    settings_file: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            envvar="JOTL_SETTINGS",
            dir_okay=False,
            help="Path to a YAML or JSON settings file for jotl itself.",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging.")
    ] = False,
) -> None:
    """Load settings and logging shared by every command."""
    _configure_logging(verbose)
    try:
        ctx.obj = load_settings(settings_file)
    except SettingsError as e:
        typer.echo(f"✗ {e}", err=True)
        raise typer.Exit(ExitCode.VALIDATION) from e


@app.command()
def init(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Name of Jotl project"),
    ] = None,
    driver: Annotated[
        StorageDriver | None,
        typer.Option(
            "--driver",
            "-d",
            case_sensitive=False,
            help="Database driver to use.",
        ),
    ] = None,
    log: Annotated[
        LogLevel | None,
        typer.Option("--log", "-l", case_sensitive=False, help="Log level."),
    ] = None,
    git: Annotated[
        bool,
        typer.Option("--git", "-g", help="Initialize Git repository."),
    ] = False,
) -> None:
    """Initialize a Jotl project in the current directory.

    Creates the jotl directory with its configuration, environment file and
    database bootstrap files. Options not given as flags are asked for
    interactively.
    """
    settings: JotlSettings = ctx.obj or JotlSettings()
    _CONSOLE.print(Text(LOGO, style=LOGO_STYLE))

    project = ProjectConfiguration(
        name=name or "",
        storage_driver=driver,
        log_level=log,
        version_control=git,
    )
    command = _build_init_command(settings)
    result = command.execute(project, Path.cwd())

    if not result.success:
        typer.echo(result.message, err=True)
        raise typer.Exit(result.exit_code)

    _CONSOLE.print(result.message, markup=False, highlight=False)
    if result.hint:
        _CONSOLE.print(
            "Tip: Repeat the equivalent Jotl with the following "
            "non-interactive command:",
            style=TIP_STYLE,
        )
        _CONSOLE.print(f"• {result.hint}", markup=False, highlight=False)


@app.command("version")
def version_cmd() -> None:
    """Display application version information."""
    try:
        installed = version("jotl")
    except PackageNotFoundError:
        installed = __version__
    typer.echo(f"Jotl CLI version: {installed}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
