"""Domain models for jotl projects."""

from jotl.core.models.project import (
    MODULE_NAME_PATTERN,
    LogLevel,
    ProjectConfiguration,
    StorageDriver,
    is_valid_module_name,
    validate_project_name,
)

__all__ = [
    "MODULE_NAME_PATTERN",
    "LogLevel",
    "ProjectConfiguration",
    "StorageDriver",
    "is_valid_module_name",
    "validate_project_name",
]
