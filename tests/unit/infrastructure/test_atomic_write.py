"""Unit tests for atomic text writes."""

from __future__ import annotations

from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch

from jotl.config import JotlConfig, save_config
from jotl.config.project_file import ProjectSection
from jotl.core.infrastructure import atomic_write
from jotl.core.infrastructure.atomic_write import atomic_write_text


@pytest.mark.unit
def test_atomic_write_text_creates_parents_and_replaces(tmp_path: Path) -> None:
    """Content lands at the final path and no temp file remains."""
    path = tmp_path / "jotl" / ".env"

    atomic_write_text(path, "A=1\n")
    atomic_write_text(path, "A=2\n")

    assert path.read_text(encoding="utf-8") == "A=2\n"
    assert [p.name for p in path.parent.iterdir()] == [".env"]


@pytest.mark.unit
def test_atomic_write_text_removes_temp_on_failure(
    tmp_path: Path, monkeypatch: MonkeyPatch
) -> None:
    """A failed rename leaves the old file and no temp file behind."""
    # Arrange
    path = tmp_path / "config.yaml"
    path.write_text("old\n", encoding="utf-8")

    def failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(atomic_write.os, "replace", failing_replace)

    # Act
    with pytest.raises(OSError, match="disk full"):
        atomic_write_text(path, "new\n")

    # Assert
    assert path.read_text(encoding="utf-8") == "old\n"
    assert [p.name for p in tmp_path.iterdir()] == ["config.yaml"]


@pytest.mark.unit
def test_save_config_cleans_up_after_failed_write(
    tmp_path: Path, monkeypatch: MonkeyPatch
) -> None:
    """Config saves share the same cleanup on failure."""
    path = tmp_path / "jotl" / "config.yaml"
    config = JotlConfig.model_validate(
        {
            "project": ProjectSection(name="demo").model_dump(),
            "database": {"driver": "sqlite", "path": "jotl/db/jotl.db"},
        }
    )

    def failing_fsync(fd: int) -> None:
        raise OSError("io error")

    monkeypatch.setattr(atomic_write.os, "fsync", failing_fsync)

    with pytest.raises(OSError, match="io error"):
        save_config(config, path)

    assert list(path.parent.iterdir()) == []
    assert not path.exists()
