"""Unit tests for the selection step catalog."""

from __future__ import annotations

import dataclasses

import pytest

from jotl.core.application.catalog import (
    DRIVER_STEP,
    GIT_STEP,
    GIT_YES,
    LOG_LEVEL_STEP,
    build_selection_steps,
)
from jotl.core.models.project import LogLevel, StorageDriver


@pytest.mark.unit
def test_catalog_exposes_driver_log_level_and_git() -> None:
    """The name is free text, so it has no selection step."""
    steps = build_selection_steps()

    assert set(steps) == {DRIVER_STEP, LOG_LEVEL_STEP, GIT_STEP}


@pytest.mark.unit
def test_option_values_cover_enum_domains() -> None:
    """Every option maps onto a driver, a log level or the git choice."""
    steps = build_selection_steps()

    assert {o.value for o in steps[DRIVER_STEP].options} == set(StorageDriver)
    assert {o.value for o in steps[LOG_LEVEL_STEP].options} == set(LogLevel)
    assert [o.label for o in steps[GIT_STEP].options] == ["Yes", "Skip"]
    assert steps[GIT_STEP].option_for("yes").value == GIT_YES


@pytest.mark.unit
def test_defaults_are_carried_into_steps() -> None:
    """Known defaults are recorded on their steps."""
    steps = build_selection_steps(StorageDriver.POSTGRES, LogLevel.WARN)

    assert steps[DRIVER_STEP].default == "postgres"
    assert steps[LOG_LEVEL_STEP].default == "warn"
    assert steps[GIT_STEP].default == ""


@pytest.mark.unit
def test_steps_are_immutable() -> None:
    """Neither the mapping nor the descriptors can be modified."""
    steps = build_selection_steps()

    with pytest.raises(TypeError):
        steps["extra"] = steps[GIT_STEP]  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        steps[GIT_STEP].header = "changed"  # type: ignore[misc]


@pytest.mark.unit
def test_unknown_option_label_raises() -> None:
    """Looking up a label that is not offered fails loudly."""
    with pytest.raises(KeyError):
        build_selection_steps()[DRIVER_STEP].option_for("mysql")
