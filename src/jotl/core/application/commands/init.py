"""Init command: resolve the project options, then provision the project."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from jotl.config.settings import JotlSettings
from jotl.core.application.command_line import (
    build_noninteractive_command,
    init_flags,
)
from jotl.core.application.commands.base import Command, CommandResult, ExitCode
from jotl.core.application.pipeline import (
    PipelineOutcome,
    ProvisioningContext,
    ProvisioningPipeline,
)
from jotl.core.application.progress import ProgressCoordinator, ProgressIndicator
from jotl.core.application.resolver import FieldResolver, PromptRenderer
from jotl.core.errors import ProjectValidationError, ResolutionCancelled
from jotl.core.infrastructure.run_cmd import CommandRunner
from jotl.core.infrastructure.storage import Storage
from jotl.core.models.project import ProjectConfiguration, validate_project_name

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = (
    "✗ The program encountered an unexpected issue and had to exit. "
    "The error was: {error}\n\n"
    "If this problem persists, please report it with the error message above."
)


class InitCommand(Command):
    """Command to initialize a new jotl project in a working directory."""

    def __init__(
        self,
        *,
        renderer: PromptRenderer,
        indicator_factory: Callable[[], ProgressIndicator],
        settings: JotlSettings | None = None,
        pipeline: ProvisioningPipeline | None = None,
        storage: Storage | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize InitCommand with dependencies.

        Args:
            renderer: Prompt renderer for fields not given as flags
            indicator_factory: Builds the progress indicator shown while provisioning
            settings: Tool settings (defaults when None)
            pipeline: Provisioning pipeline (default steps when None)
            storage: Storage instance for file operations
            runner: Subprocess runner for git and the package-fetch tool
        """
        self.renderer = renderer
        self.indicator_factory = indicator_factory
        self.settings = settings or JotlSettings()
        self.pipeline = pipeline or ProvisioningPipeline()
        self.storage = storage or Storage()
        self.runner = runner

    def validate(self, project: ProjectConfiguration) -> bool:
        """Validate options supplied as flags, before any prompt is shown.

        Args:
            project: Record pre-filled from command-line flags

        Returns:
            True if validation passes

        Raises:
            ProjectValidationError: If a supplied project name is malformed
        """
        if project.name:
            validate_project_name(project.name)
        return True

    def execute(
        self, project: ProjectConfiguration, working_directory: Path
    ) -> CommandResult:
        """Resolve every field, then provision the project.

        Args:
            project: Record pre-filled from command-line flags
            working_directory: Directory the project is created in

        Returns:
            CommandResult carrying the message, exit code and optional hint
        """
        try:
            self.validate(project)
            FieldResolver(self.renderer).resolve(project)
        except ProjectValidationError as e:
            logger.debug("Rejected project name %r", e.name)
            return CommandResult(
                success=False,
                message=f"✗ Failed to initialize project: {e}",
                exit_code=ExitCode.VALIDATION,
            )
        except ResolutionCancelled as e:
            logger.debug("Resolution cancelled at %s", e.field)
            return CommandResult(
                success=False,
                message="✗ Project initialization cancelled",
                exit_code=ExitCode.CANCELLED,
            )

        project.set_working_directory(working_directory)
        context = ProvisioningContext.for_project(
            project, self.settings, storage=self.storage, runner=self.runner
        )

        coordinator = ProgressCoordinator(self.indicator_factory())
        try:
            with coordinator:
                outcome = self.pipeline.run(context)
        except Exception as e:  # noqa: BLE001
            logger.exception("Unexpected error while provisioning the project")
            return CommandResult(
                success=False,
                message=UNEXPECTED_ERROR_MESSAGE.format(error=e),
                exit_code=ExitCode.FAILURE,
                files_created=list(context.created),
            )

        return self._result_for(outcome, context)

    def _result_for(
        self, outcome: PipelineOutcome, context: ProvisioningContext
    ) -> CommandResult:
        if outcome.fatal is not None:
            return CommandResult(
                success=False,
                message=f"✗ GIT CONFIG ISSUE: {outcome.fatal}",
                exit_code=ExitCode.FATAL_PRECONDITION,
                files_created=list(context.created),
            )
        if outcome.failure is not None:
            return CommandResult(
                success=False,
                message=(
                    "✗ Failed to initialize project: "
                    f"{outcome.failure}\n\n"
                    "Steps already completed were kept; fix the problem and "
                    "run 'jotl init' again."
                ),
                exit_code=ExitCode.FAILURE,
                files_created=list(context.created),
            )

        project = context.project
        hint = None
        if project.interactive:
            hint = build_noninteractive_command("init", init_flags(project))
        return CommandResult(
            success=True,
            message=(
                f"✓ Jotl project '{project.name}' initialized in "
                f"{context.paths.project_dir}"
            ),
            hint=hint,
            files_created=list(context.created),
        )
