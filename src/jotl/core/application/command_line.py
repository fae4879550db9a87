"""Rebuild the non-interactive equivalent of an interactive ``jotl`` run."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from jotl.core.models.project import ProjectConfiguration

PROGRAM_NAME = "jotl"


@dataclass(frozen=True)
class FlagValue:
    """A declared flag and its final value."""

    name: str
    value: str | bool


def init_flags(project: ProjectConfiguration) -> tuple[FlagValue, ...]:
    """Flags of ``jotl init`` in declaration order, read from the record."""
    return (
        FlagValue("name", project.name),
        FlagValue("driver", str(project.storage_driver or "")),
        FlagValue("log", str(project.log_level or "")),
        FlagValue("git", project.version_control),
        FlagValue("help", False),
    )


def build_noninteractive_command(use: str, flags: Sequence[FlagValue]) -> str:
    """Build the fully flagged command line equivalent to ``flags``.

    Boolean flags become bare switches and are omitted when false; ``help`` is
    always skipped; order follows ``flags``.

    Args:
        use: Subcommand name, e.g. ``init``.
        flags: Declared flags with their final values.

    Returns:
        Command line such as ``jotl init --name demo --git``.
    """
    parts = [PROGRAM_NAME, use]
    for flag in flags:
        if flag.name == "help":
            continue
        if isinstance(flag.value, bool):
            if flag.value:
                parts.append(f"--{flag.name}")
            continue
        parts.extend([f"--{flag.name}", flag.value])
    return " ".join(parts)
