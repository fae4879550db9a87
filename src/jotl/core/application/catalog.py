"""Descriptors for the interactive selection steps of ``jotl init``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from jotl.core.models.project import LogLevel, StorageDriver

DRIVER_STEP = "driver"
LOG_LEVEL_STEP = "log_level"
GIT_STEP = "git"

GIT_YES = "yes"
GIT_SKIP = "skip"


@dataclass(frozen=True)
class SelectionOption:
    """One selectable option: display label, description and resolved value."""

    label: str
    description: str
    value: str


@dataclass(frozen=True)
class SelectionStep:
    """Immutable description of a single selection prompt."""

    step_name: str
    header: str
    options: tuple[SelectionOption, ...]
    default: str = ""

    def option_for(self, label: str) -> SelectionOption:
        """Return the option whose label matches ``label`` case-insensitively.

        Raises:
            KeyError: If no option has that label.
        """
        for option in self.options:
            if option.label.lower() == label.lower():
                return option
        raise KeyError(f"Unknown option {label!r} for step {self.step_name!r}")


def build_selection_steps(
    storage_driver: StorageDriver | None = None,
    log_level: LogLevel | None = None,
) -> Mapping[str, SelectionStep]:
    """Build the selection steps, carrying the defaults already known.

    Args:
        storage_driver: Driver supplied on the command line, if any.
        log_level: Log level supplied on the command line, if any.

    Returns:
        Read-only mapping of step key to step descriptor.
    """
    steps = {
        DRIVER_STEP: SelectionStep(
            step_name="Database Driver",
            header="What database driver do you want to use in your Jotl project?",
            options=(
                SelectionOption(
                    "Sqlite",
                    "Store logs in a lightweight, file-based SQLite database",
                    StorageDriver.SQLITE.value,
                ),
                SelectionOption(
                    "Postgres",
                    "Store logs in a robust, production-ready PostgreSQL database",
                    StorageDriver.POSTGRES.value,
                ),
            ),
            default=storage_driver.value if storage_driver else "",
        ),
        LOG_LEVEL_STEP: SelectionStep(
            step_name="Log Level",
            header="Choose log level.",
            options=(
                SelectionOption(
                    "Info", "Standard information logging", LogLevel.INFO.value
                ),
                SelectionOption(
                    "Debug",
                    "Detailed logging for debugging purposes",
                    LogLevel.DEBUG.value,
                ),
                SelectionOption(
                    "Warn",
                    "Log warning messages and higher severity issues",
                    LogLevel.WARN.value,
                ),
                SelectionOption(
                    "Error", "Only log errors and critical issues", LogLevel.ERROR.value
                ),
            ),
            default=log_level.value if log_level else "",
        ),
        GIT_STEP: SelectionStep(
            step_name="Git Repository",
            header="Initialize a Git Repository for your Jotl project.",
            options=(
                SelectionOption(
                    "Yes", "Initialize a new git repository stage all changes", GIT_YES
                ),
                SelectionOption(
                    "Skip", "Proceed without initializing a git repository", GIT_SKIP
                ),
            ),
        ),
    }
    return MappingProxyType(steps)
