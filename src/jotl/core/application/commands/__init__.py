"""jotl commands."""

from jotl.core.application.commands.base import Command, CommandResult, ExitCode
from jotl.core.application.commands.init import InitCommand

__all__ = ["Command", "CommandResult", "ExitCode", "InitCommand"]
