"""Resolve each project field from flags or interactive prompts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from jotl.core.application.catalog import (
    DRIVER_STEP,
    GIT_STEP,
    GIT_YES,
    LOG_LEVEL_STEP,
    SelectionOption,
    SelectionStep,
    build_selection_steps,
)
from jotl.core.errors import ResolutionCancelled
from jotl.core.models.project import (
    LogLevel,
    ProjectConfiguration,
    StorageDriver,
    validate_project_name,
)

logger = logging.getLogger(__name__)

NAME_HEADER = "Name your Jotl project."


class PromptRenderer(Protocol):
    """Interactive prompt collaborator. Returning None means the user cancelled."""

    def ask_text(self, header: str) -> str | None:
        """Ask for free text."""

    def select(self, step: SelectionStep) -> SelectionOption | None:
        """Ask the user to pick one of ``step.options``."""


class FieldResolver:
    """Resolve project fields in the fixed order name, driver, log level, git."""

    def __init__(
        self,
        renderer: PromptRenderer,
        steps: Mapping[str, SelectionStep] | None = None,
    ) -> None:
        """Create resolver.

        Args:
            renderer: Prompt renderer used for unresolved fields.
            steps: Selection step catalog; built from the record when None.
        """
        self._renderer = renderer
        self._steps = steps

    def resolve(self, project: ProjectConfiguration) -> ProjectConfiguration:
        """Fill every unresolved field of ``project`` in place.

        A supplied name is validated before any prompt is shown.

        Args:
            project: Record pre-filled from command-line flags.

        Returns:
            The same record, fully resolved.

        Raises:
            ProjectValidationError: If the name is malformed.
            ResolutionCancelled: If the user cancels a prompt.
        """
        if project.name:
            validate_project_name(project.name)
        steps = self._steps or build_selection_steps(
            project.storage_driver, project.log_level
        )
        project.name = self.resolve_name(project)
        project.storage_driver = self.resolve_driver(project, steps[DRIVER_STEP])
        project.log_level = self.resolve_log_level(project, steps[LOG_LEVEL_STEP])
        project.version_control = self.resolve_git(project, steps[GIT_STEP])
        return project

    def resolve_name(self, project: ProjectConfiguration) -> str:
        if project.name:
            return validate_project_name(project.name)
        answer = self._renderer.ask_text(NAME_HEADER)
        if answer is None:
            raise ResolutionCancelled("name")
        project.interactive = True
        return validate_project_name(answer.strip())

    def resolve_driver(
        self, project: ProjectConfiguration, step: SelectionStep
    ) -> StorageDriver:
        if project.storage_driver is not None:
            return project.storage_driver
        return StorageDriver(self._select(project, step, "driver").value)

    def resolve_log_level(
        self, project: ProjectConfiguration, step: SelectionStep
    ) -> LogLevel:
        if project.log_level is not None:
            return project.log_level
        return LogLevel(self._select(project, step, "log level").value)

    def resolve_git(self, project: ProjectConfiguration, step: SelectionStep) -> bool:
        if project.version_control:
            return True
        return self._select(project, step, "git").value == GIT_YES

    def _select(
        self, project: ProjectConfiguration, step: SelectionStep, field: str
    ) -> SelectionOption:
        choice = self._renderer.select(step)
        if choice is None:
            raise ResolutionCancelled(field)
        project.interactive = True
        logger.debug("Resolved %s interactively: %s", field, choice.value)
        return choice
