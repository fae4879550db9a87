"""Jotl settings and project config file handling."""

from jotl.config.project_file import (
    DashboardSection,
    DatabaseSection,
    JotlConfig,
    LogFormat,
    LoggingSection,
    ProjectFileError,
    ProjectSection,
    dump_config,
    load_config,
    save_config,
)
from jotl.config.settings import (
    JotlSettings,
    PostgresSettings,
    SettingsError,
    load_settings,
)

__all__ = [
    "DashboardSection",
    "DatabaseSection",
    "JotlConfig",
    "JotlSettings",
    "LogFormat",
    "LoggingSection",
    "PostgresSettings",
    "ProjectFileError",
    "ProjectSection",
    "SettingsError",
    "dump_config",
    "load_config",
    "load_settings",
    "save_config",
]
