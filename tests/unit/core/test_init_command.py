"""Unit tests for InitCommand."""

from __future__ import annotations

from pathlib import Path

import pytest

from jotl.config.settings import JotlSettings
from jotl.core.application.commands import ExitCode, InitCommand
from jotl.core.application.pipeline import ProvisioningPipeline, ProvisioningStep
from jotl.core.models.project import LogLevel, ProjectConfiguration, StorageDriver
from tests.unit.helpers import CountingIndicator, FakeRenderer, FakeRunner


def _command(
    renderer: FakeRenderer | None = None,
    runner: FakeRunner | None = None,
    indicator: CountingIndicator | None = None,
    pipeline: ProvisioningPipeline | None = None,
) -> tuple[InitCommand, CountingIndicator]:
    indicator = indicator or CountingIndicator()
    command = InitCommand(
        renderer=renderer or FakeRenderer(),
        indicator_factory=lambda: indicator,
        settings=JotlSettings(),
        pipeline=pipeline,
        runner=runner or FakeRunner(),
    )
    return command, indicator


def _flagged_project(**overrides: object) -> ProjectConfiguration:
    values: dict[str, object] = {
        "name": "demo",
        "storage_driver": StorageDriver.SQLITE,
        "log_level": LogLevel.INFO,
        "version_control": True,
    }
    values.update(overrides)
    return ProjectConfiguration(**values)  # type: ignore[arg-type]


@pytest.mark.unit
def test_fully_flagged_run_succeeds_without_hint(tmp_path: Path) -> None:
    """No prompts means no tip to repeat the command."""
    # Arrange
    renderer = FakeRenderer()
    command, indicator = _command(renderer=renderer)

    # Act
    result = command.execute(_flagged_project(), tmp_path)

    # Assert
    assert result.success
    assert result.exit_code == ExitCode.OK
    assert result.hint is None
    assert "demo" in result.message
    assert renderer.prompt_count == 0
    assert indicator.release_calls == 1
    assert "jotl/config.yaml" in result.files_created


@pytest.mark.unit
def test_interactive_run_returns_equivalent_command(tmp_path: Path) -> None:
    """A prompted run ends with the fully flagged command line."""
    renderer = FakeRenderer(
        name="demo",
        selections={
            "Database Driver": "Postgres",
            "Log Level": "Debug",
            "Git Repository": "Yes",
        },
    )
    command, _ = _command(renderer=renderer)

    result = command.execute(ProjectConfiguration(), tmp_path)

    assert result.success
    assert result.hint == "jotl init --name demo --driver postgres --log debug --git"


@pytest.mark.unit
def test_invalid_name_has_no_side_effects(tmp_path: Path) -> None:
    """A rejected name fails before prompts, the indicator or any file."""
    renderer = FakeRenderer()
    runner = FakeRunner()
    command, indicator = _command(renderer=renderer, runner=runner)

    result = command.execute(_flagged_project(name="bad name"), tmp_path)

    assert not result.success
    assert result.exit_code == ExitCode.VALIDATION
    assert "'bad name' is not a valid module name" in result.message
    assert renderer.prompt_count == 0
    assert runner.calls == []
    assert not indicator.started.is_set()
    assert indicator.release_calls == 0
    assert list(tmp_path.iterdir()) == []


@pytest.mark.unit
def test_cancelled_prompt_exits_cleanly(tmp_path: Path) -> None:
    """Cancelling a prompt does not provision anything."""
    renderer = FakeRenderer(selections={"Database Driver": None})
    command, indicator = _command(renderer=renderer)

    result = command.execute(ProjectConfiguration(name="demo"), tmp_path)

    assert result.exit_code == ExitCode.CANCELLED
    assert "cancelled" in result.message
    assert indicator.release_calls == 0
    assert list(tmp_path.iterdir()) == []


@pytest.mark.unit
def test_missing_git_identity_reports_fatal_precondition(tmp_path: Path) -> None:
    """An unset git identity maps to its own exit code."""
    runner = FakeRunner({("git", "config"): 1})
    command, indicator = _command(runner=runner)

    result = command.execute(_flagged_project(), tmp_path)

    assert result.exit_code == ExitCode.FATAL_PRECONDITION
    assert result.message.startswith("✗ GIT CONFIG ISSUE:")
    assert indicator.release_calls == 1


@pytest.mark.unit
def test_step_failure_reports_failing_step(tmp_path: Path) -> None:
    """A failing step is named and the terminal is released once."""
    runner = FakeRunner({("go", "get"): 2})
    renderer = FakeRenderer(selections={"Git Repository": "Skip"})
    command, indicator = _command(renderer=renderer, runner=runner)

    result = command.execute(_flagged_project(version_control=False), tmp_path)

    assert result.exit_code == ExitCode.FAILURE
    assert "install_driver" in result.message
    assert result.files_created == ["jotl/config.yaml"]
    assert indicator.release_calls == 1
    assert indicator.finished_before_release is True


@pytest.mark.unit
def test_scaffold_failure_releases_terminal_once(tmp_path: Path) -> None:
    """A blocked project directory fails step 4 and releases once."""
    (tmp_path / "jotl").write_text("not a directory", encoding="utf-8")
    runner = FakeRunner()
    renderer = FakeRenderer(selections={"Git Repository": "Skip"})
    command, indicator = _command(renderer=renderer, runner=runner)

    result = command.execute(_flagged_project(version_control=False), tmp_path)

    assert result.exit_code == ExitCode.FAILURE
    assert "step 4 (scaffold_directories)" in result.message
    assert runner.calls == []
    assert renderer.selection_prompts == ["Git Repository"]
    assert indicator.release_calls == 1


@pytest.mark.unit
def test_unexpected_error_is_reported_after_release(tmp_path: Path) -> None:
    """A programming error still releases the terminal before reporting."""

    def buggy(context: object) -> None:
        raise ZeroDivisionError("boom")

    pipeline = ProvisioningPipeline([ProvisioningStep("buggy", buggy)])
    command, indicator = _command(pipeline=pipeline)

    result = command.execute(_flagged_project(), tmp_path)

    assert result.exit_code == ExitCode.FAILURE
    assert "unexpected issue" in result.message
    assert "boom" in result.message
    assert indicator.release_calls == 1
