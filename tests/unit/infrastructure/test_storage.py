"""Unit tests for Storage file operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from jotl.core.infrastructure.storage import Storage


@pytest.mark.unit
def test_create_file_skips_existing(tmp_path: Path) -> None:
    """Existing files are never overwritten."""
    # Arrange
    storage = Storage()
    path = tmp_path / "nested" / "file.txt"

    # Act
    created_first = storage.create_file(path, "first")
    created_second = storage.create_file(path, "second")

    # Assert
    assert created_first is True
    assert created_second is False
    assert path.read_text() == "first"


@pytest.mark.unit
def test_write_text_replaces_content_atomically(tmp_path: Path) -> None:
    """write_text replaces content and leaves no temp files behind."""
    storage = Storage()
    path = tmp_path / "out" / ".env"

    storage.write_text(path, "A=1\n")
    storage.write_text(path, "A=2\n")

    assert path.read_text() == "A=2\n"
    assert [p.name for p in path.parent.iterdir()] == [".env"]


@pytest.mark.unit
def test_ensure_line_creates_file_and_appends_once(tmp_path: Path) -> None:
    """The line is added once no matter how often it is ensured."""
    storage = Storage()
    path = tmp_path / ".gitignore"

    assert storage.ensure_line(path, "/jotl") is True
    assert storage.ensure_line(path, "/jotl") is False

    assert path.read_text().splitlines().count("/jotl") == 1


@pytest.mark.unit
def test_ensure_line_keeps_existing_content(tmp_path: Path) -> None:
    """Existing entries stay and the new one goes on its own line."""
    storage = Storage()
    path = tmp_path / ".gitignore"
    path.write_text("*.pyc", encoding="utf-8")

    storage.ensure_line(path, "/jotl")

    assert path.read_text() == "*.pyc\n/jotl\n"


@pytest.mark.unit
def test_ensure_line_accepts_trailing_slash_variant(tmp_path: Path) -> None:
    """A directory-style entry already ignores the project directory."""
    storage = Storage()
    path = tmp_path / ".gitignore"
    path.write_text("/jotl/\n", encoding="utf-8")

    assert storage.ensure_line(path, "/jotl") is False
    assert path.read_text() == "/jotl/\n"


@pytest.mark.unit
def test_read_template_returns_bundled_text() -> None:
    """Bundled templates are readable through package resources."""
    text = Storage().read_template("env.tmpl")

    assert "DB_CONNECTION_STRING=${connection_string}" in text


@pytest.mark.unit
def test_read_template_missing_raises() -> None:
    """Unknown template names raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Template not found"):
        Storage().read_template("missing.tmpl")


@pytest.mark.unit
def test_ensure_line_keeps_non_utf8_bytes(tmp_path: Path) -> None:
    """A latin-1 .gitignore is extended without losing its original bytes."""
    storage = Storage()
    path = tmp_path / ".gitignore"
    path.write_bytes(b"# caf\xe9\nnode_modules\n")

    assert storage.ensure_line(path, "/jotl") is True
    assert storage.ensure_line(path, "/jotl") is False

    assert path.read_bytes() == b"# caf\xe9\nnode_modules\n/jotl\n"
