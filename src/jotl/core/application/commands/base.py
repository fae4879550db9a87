"""Base command interface following the Command Pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ExitCode(IntEnum):
    """Process exit statuses reported by jotl commands."""

    OK = 0
    FAILURE = 1
    VALIDATION = 2
    FATAL_PRECONDITION = 3
    CANCELLED = 130


@dataclass
class CommandResult:
    """Outcome of a command, ready for the CLI to print.

    Attributes:
        success: Whether the command executed successfully
        message: Human-readable summary message
        exit_code: Process exit status
        hint: Optional follow-up tip shown after the message
        files_created: Paths created, relative to the working directory
    """

    success: bool
    message: str
    exit_code: ExitCode = ExitCode.OK
    hint: str | None = None
    files_created: list[str] = field(default_factory=list)


class Command(ABC):
    """Abstract base class for all jotl commands.

    All commands must implement execute() and validate() methods.
    """

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> CommandResult:
        """Execute the command and return result.

        Returns:
            CommandResult instance with success status and message
        """

    @abstractmethod
    def validate(self, *args: Any, **kwargs: Any) -> bool:
        """Validate prerequisites before execution.

        Returns:
            True if validation passes

        Raises:
            ProjectValidationError: If validation fails with specific error details
        """
