"""On-disk project configuration stored in ``jotl/config.yaml``."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jotl.core.infrastructure.atomic_write import atomic_write_text
from jotl.core.models.project import LogLevel, ProjectConfiguration, StorageDriver

DEFAULT_VERSION = "1.0.0"
DEFAULT_TIME_FORMAT = "RFC3339"
DEFAULT_REFRESH_RATE = 5


class LogFormat(StrEnum):
    """Supported output formats for captured logs."""

    TEXT = "text"


class ProjectSection(BaseModel):
    """Project identification."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    description: str = ""


class DatabaseSection(BaseModel):
    """Database connection settings."""

    model_config = ConfigDict(extra="forbid")

    driver: StorageDriver
    path: str = Field(..., description="Connection string or database file path")


class LoggingSection(BaseModel):
    """Log handling settings."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.TEXT
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, alias="timeFormat")


class DashboardSection(BaseModel):
    """Web dashboard settings."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    port: int = Field(default=8080, ge=1, le=65535)
    theme: str = "system"
    refresh_rate: int = Field(default=DEFAULT_REFRESH_RATE, ge=1, alias="refreshRate")


class JotlConfig(BaseModel):
    """Root project configuration persisted by ``jotl init``."""

    model_config = ConfigDict(extra="forbid")

    version: str = DEFAULT_VERSION
    project: ProjectSection
    database: DatabaseSection
    logging: LoggingSection = Field(default_factory=LoggingSection)
    dashboard: DashboardSection = Field(default_factory=DashboardSection)

    @classmethod
    def from_project(
        cls, project: ProjectConfiguration, *, database_path: str
    ) -> JotlConfig:
        """Map a resolved project record onto the on-disk schema.

        Args:
            project: Fully resolved project configuration.
            database_path: Connection string or database file path.

        Returns:
            Config ready to be saved.
        """
        driver = project.storage_driver
        level = project.log_level
        if driver is None or level is None:
            raise ValueError("storage driver and log level must be resolved")
        return cls(
            project=ProjectSection(name=project.name),
            database=DatabaseSection(driver=driver, path=database_path),
            logging=LoggingSection(level=level),
        )

    def set_log_level(self, level: str) -> None:
        """Update the logging level if valid.

        Args:
            level: One of the supported log level identifiers.

        Raises:
            ValueError: If the level is not supported.
        """
        try:
            self.logging.level = LogLevel(level)
        except ValueError as exc:
            raise ValueError(f"invalid log level: {level}") from exc

    def set_project_name(self, name: str) -> None:
        """Update the project name."""
        self.project.name = name

    def set_description(self, description: str) -> None:
        """Update the project description."""
        self.project.description = description


class ProjectFileError(RuntimeError):
    """Raised when the project config file cannot be read or validated."""


def dump_config(config: JotlConfig) -> str:
    """Serialize config to YAML text.

    Args:
        config: Project config.

    Returns:
        YAML document using the on-disk key names.
    """
    payload = config.model_dump(mode="json", by_alias=True)
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def save_config(config: JotlConfig, path: Path) -> None:
    """Write config YAML atomically, creating parent directories.

    Args:
        config: Project config.
        path: Destination file path.
    """
    atomic_write_text(path, dump_config(config))


def load_config(path: Path) -> JotlConfig:
    """Read and validate a project config file.

    Args:
        path: Config file path.

    Returns:
        Parsed config.

    Raises:
        ProjectFileError: If the file is missing, malformed or invalid.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProjectFileError(f"failed to read config file: {exc}") from exc
    try:
        payload = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ProjectFileError(f"failed to parse config file: {exc}") from exc
    if not isinstance(payload, dict):
        raise ProjectFileError("failed to parse config file: root must be a mapping")
    try:
        return JotlConfig.model_validate(payload)
    except ValidationError as exc:
        raise ProjectFileError(f"invalid config file: {exc}") from exc
