"""File-system operations used by the provisioning pipeline."""

from __future__ import annotations

import importlib.resources
from pathlib import Path

from jotl.core.infrastructure.atomic_write import atomic_write_text


class Storage:
    """Handles filesystem operations for jotl project artifacts."""

    def create_directory(self, path: Path) -> None:
        """Create directory if it doesn't exist.

        Args:
            path: Directory path to create
        """
        path.mkdir(parents=True, exist_ok=True)

    def create_file(self, path: Path, content: str = "") -> bool:
        """Create file with content. Skip if exists (idempotent).

        Args:
            path: File path to create
            content: Content to write to file

        Returns:
            True if the file was created, False if it already existed
        """
        if path.exists():
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return True

    def write_text(self, path: Path, content: str) -> None:
        """Write text file atomically, replacing any previous content.

        Uses a temporary file and atomic rename to ensure file integrity.

        Args:
            path: File path to write
            content: Text content
        """
        atomic_write_text(path, content)

    def ensure_line(self, path: Path, line: str) -> bool:
        """Make sure ``line`` appears in ``path``, creating the file if needed.

        A trailing slash on an existing entry counts as a match, so ``/jotl/``
        satisfies ``/jotl``. Bytes that are not valid UTF-8 are kept as they are.

        Args:
            path: Text file path (e.g. ``.gitignore``)
            line: Line to ensure

        Returns:
            True if the line was appended, False if it was already present
        """
        self.create_file(path)
        content = path.read_text(encoding="utf-8", errors="surrogateescape")
        accepted = {line, f"{line.rstrip('/')}/"}
        if any(existing.strip() in accepted for existing in content.splitlines()):
            return False

        separator = "" if not content or content.endswith("\n") else "\n"
        with path.open("a", encoding="utf-8", errors="surrogateescape") as f:
            f.write(f"{separator}{line}\n")
        return True

    def read_template(self, template_name: str) -> str:
        """Read a template bundled in the ``jotl/templates`` directory.

        Args:
            template_name: Name of the template file (e.g. "env.tmpl")

        Returns:
            Template text

        Raises:
            FileNotFoundError: If template file doesn't exist
        """
        template_path = importlib.resources.files("jotl") / "templates" / template_name
        if not template_path.is_file():
            raise FileNotFoundError(f"Template not found: {template_name}")
        return template_path.read_text(encoding="utf-8")
