"""Project configuration record resolved by ``jotl init``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from jotl.core.errors import ProjectValidationError

MODULE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+(?:[\/.][a-zA-Z0-9_-]+)*$")


class StorageDriver(StrEnum):
    """Supported storage driver identifiers."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"

    @property
    def is_file_based(self) -> bool:
        """Return whether the driver stores data in a local file."""
        return self is StorageDriver.SQLITE


class LogLevel(StrEnum):
    """Supported log level identifiers."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


def is_valid_module_name(name: str) -> bool:
    """Return whether ``name`` is usable as a project module name.

    Alphanumerics, underscores and hyphens, optionally separated by single
    dots or slashes.

    Args:
        name: Candidate project name.

    Returns:
        True when the name matches the module name pattern.
    """
    return MODULE_NAME_PATTERN.fullmatch(name) is not None


def validate_project_name(name: str) -> str:
    """Return ``name`` unchanged or raise when it is not a valid module name.

    Args:
        name: Candidate project name.

    Returns:
        The validated name.

    Raises:
        ProjectValidationError: If the name is empty or malformed.
    """
    if not is_valid_module_name(name):
        raise ProjectValidationError(name)
    return name


@dataclass
class ProjectConfiguration:
    """Mutable record filled incrementally while resolving ``init`` options.

    Empty name, ``None`` enums and ``False`` for version control mean the field
    is still unresolved.
    """

    name: str = ""
    storage_driver: StorageDriver | None = None
    log_level: LogLevel | None = None
    version_control: bool = False
    working_directory: Path | None = None
    interactive: bool = False

    def set_working_directory(self, path: Path) -> None:
        """Fix the working directory once, at the start of provisioning.

        Args:
            path: Directory the project is created in.

        Raises:
            ValueError: If the working directory was already set.
        """
        if self.working_directory is not None:
            raise ValueError(
                f"working directory already set to {self.working_directory}"
            )
        self.working_directory = path.resolve()

    def ensure_resolved(self) -> None:
        """Check that every field holds a concrete value.

        Raises:
            ValueError: If a field is still unresolved.
        """
        missing = [
            field
            for field, value in (
                ("name", self.name or None),
                ("storage_driver", self.storage_driver),
                ("log_level", self.log_level),
                ("working_directory", self.working_directory),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"unresolved project fields: {', '.join(missing)}")
