"""Ordered, fail-fast provisioning of a jotl project."""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - only for exception types
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from jotl.config.project_file import JotlConfig, save_config
from jotl.config.settings import JotlSettings
from jotl.core.errors import FatalPrecondition, ProvisioningError, StepFailure
from jotl.core.infrastructure import git
from jotl.core.infrastructure.paths import ProjectPaths
from jotl.core.infrastructure.run_cmd import CommandRunner, run_subprocess
from jotl.core.infrastructure.storage import Storage
from jotl.core.infrastructure.templates import render_compose, render_env
from jotl.core.models.project import ProjectConfiguration, StorageDriver

logger = logging.getLogger(__name__)

# Failures a step may raise that count as ordinary, recoverable step failures.
STEP_FAILURE_TYPES: tuple[type[BaseException], ...] = (
    OSError,
    UnicodeError,
    subprocess.SubprocessError,
    ProvisioningError,
)


@dataclass
class ProvisioningContext:
    """Everything a provisioning step reads or writes."""

    project: ProjectConfiguration
    paths: ProjectPaths
    settings: JotlSettings
    storage: Storage = field(default_factory=Storage)
    runner: CommandRunner = run_subprocess
    created: list[str] = field(default_factory=list)

    @classmethod
    def for_project(
        cls,
        project: ProjectConfiguration,
        settings: JotlSettings,
        *,
        storage: Storage | None = None,
        runner: CommandRunner | None = None,
    ) -> ProvisioningContext:
        """Build a context for a fully resolved project.

        Raises:
            ValueError: If the project still has unresolved fields.
        """
        project.ensure_resolved()
        working_directory = project.working_directory or Path.cwd()
        return cls(
            project=project,
            paths=ProjectPaths(working_directory, settings.project_dir),
            settings=settings,
            storage=storage or Storage(),
            runner=runner or run_subprocess,
        )

    @property
    def driver(self) -> StorageDriver:
        if self.project.storage_driver is None:
            raise ValueError("storage driver is not resolved")
        return self.project.storage_driver

    def connection_string(self) -> str:
        """Connection string written to the config and ``.env`` files."""
        if self.driver.is_file_based:
            return self.paths.relative(self.paths.db_file)
        return self.settings.postgres.connection_string()

    def record(self, path: Path) -> None:
        self.created.append(self.paths.relative(path))

    def run(self, argv: Sequence[str], *, what: str) -> None:
        """Run an external command in the working directory.

        Raises:
            ProvisioningError: If the command exits non-zero.
        """
        result = self.runner(list(argv), cwd=self.paths.working_directory)
        if result.returncode != 0:
            raise ProvisioningError(
                f"{what} failed with status {result.returncode}",
                data={"argv": list(argv), "stderr": (result.stderr or "").strip()},
            )


def git_preflight(context: ProvisioningContext) -> None:
    """Require a git identity when version control is requested."""
    if not context.project.version_control:
        return
    key = context.settings.git_identity_key
    try:
        identity_set = git.check_git_config(key, runner=context.runner)
    except (OSError, ProvisioningError) as exc:
        raise FatalPrecondition(
            f"Could not read {key} from git config: {exc}", data={"key": key}
        ) from exc
    if not identity_set:
        raise FatalPrecondition(
            f"{key} is not set in git config. "
            "Please set up git config before trying again.",
            data={"key": key},
        )


def git_init(context: ProvisioningContext) -> None:
    """Initialize a repository unless the working directory already is one."""
    if not context.project.version_control:
        return
    if git.is_git_directory(context.paths.working_directory):
        logger.debug("%s is already a git repository", context.paths.working_directory)
        return
    git.init_repository(context.paths.working_directory, runner=context.runner)


def update_gitignore(context: ProvisioningContext) -> None:
    """Make sure the project directory is ignored by git."""
    if not context.project.version_control:
        return
    paths = context.paths
    if context.storage.ensure_line(paths.gitignore, paths.ignore_entry):
        logger.debug("Added %s to %s", paths.ignore_entry, paths.gitignore)


def scaffold_directories(context: ProvisioningContext) -> None:
    """Create the project directory and, for file-based storage, its db dir."""
    context.storage.create_directory(context.paths.project_dir)
    if context.driver.is_file_based:
        context.storage.create_directory(context.paths.db_dir)


def persist_config(context: ProvisioningContext) -> None:
    """Write ``config.yaml`` for the resolved project."""
    config = JotlConfig.from_project(
        context.project, database_path=context.connection_string()
    )
    save_config(config, context.paths.config_file)
    context.record(context.paths.config_file)


def install_driver(context: ProvisioningContext) -> None:
    """Fetch the client package for the chosen storage driver."""
    package = context.settings.driver_packages.get(context.driver)
    if not package:
        raise ProvisioningError(f"unsupported database driver: {context.driver}")
    argv = [*context.settings.install_command, package]
    context.run(argv, what=f"installing database driver {package}")


def bootstrap_database(context: ProvisioningContext) -> None:
    """Create the sqlite file or the docker-compose file for postgres."""
    paths = context.paths
    if context.driver.is_file_based:
        if context.storage.create_file(paths.db_file):
            context.record(paths.db_file)
        return
    rendered = render_compose(context.storage, context.settings.postgres)
    context.storage.write_text(paths.compose_file, rendered)
    context.record(paths.compose_file)


def write_env_file(context: ProvisioningContext) -> None:
    """Write ``.env`` with the connection string and application name."""
    rendered = render_env(
        context.storage,
        connection_string=context.connection_string(),
        app_name=context.project.name,
    )
    context.storage.write_text(context.paths.env_file, rendered)
    context.record(context.paths.env_file)


@dataclass(frozen=True)
class ProvisioningStep:
    """Named unit of side-effecting work."""

    name: str
    action: Callable[[ProvisioningContext], None]


DEFAULT_STEPS: tuple[ProvisioningStep, ...] = (
    ProvisioningStep("git_preflight", git_preflight),
    ProvisioningStep("git_init", git_init),
    ProvisioningStep("gitignore", update_gitignore),
    ProvisioningStep("scaffold_directories", scaffold_directories),
    ProvisioningStep("persist_config", persist_config),
    ProvisioningStep("install_driver", install_driver),
    ProvisioningStep("bootstrap_database", bootstrap_database),
    ProvisioningStep("write_env_file", write_env_file),
)


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of a pipeline run: success, a step failure, or a fatal precondition."""

    completed: tuple[str, ...] = ()
    failure: StepFailure | None = None
    fatal: FatalPrecondition | None = None

    @property
    def success(self) -> bool:
        return self.failure is None and self.fatal is None


class ProvisioningPipeline:
    """Run provisioning steps strictly in order, stopping at the first failure."""

    def __init__(self, steps: Sequence[ProvisioningStep] = DEFAULT_STEPS) -> None:
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[ProvisioningStep, ...]:
        return self._steps

    def run(self, context: ProvisioningContext) -> PipelineOutcome:
        """Execute all steps against ``context``.

        Ordinary failures become a ``StepFailure`` outcome and a failed
        precondition becomes a ``FatalPrecondition`` outcome. No retry and no
        rollback of completed steps. Any other exception propagates.

        Args:
            context: Provisioning context for a resolved project.

        Returns:
            Pipeline outcome.
        """
        completed: list[str] = []
        for index, step in enumerate(self._steps, start=1):
            logger.debug("Running step %d: %s", index, step.name)
            try:
                step.action(context)
            except FatalPrecondition as exc:
                logger.error("Fatal precondition in step %s: %s", step.name, exc)
                return PipelineOutcome(completed=tuple(completed), fatal=exc)
            except STEP_FAILURE_TYPES as exc:
                failure = StepFailure(index, step.name, exc)
                logger.error("Problem creating files for project. %s", failure)
                return PipelineOutcome(completed=tuple(completed), failure=failure)
            completed.append(step.name)
        return PipelineOutcome(completed=tuple(completed))
