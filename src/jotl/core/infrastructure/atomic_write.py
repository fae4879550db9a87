"""Atomic text write with fsync for generated project files."""

from __future__ import annotations

import os
import uuid
from pathlib import Path


def atomic_write_text(final_path: Path, content: str) -> None:
    """Write text to final_path atomically: temp -> fsync -> rename -> fsync dir.

    Temp file is created next to final_path so rename is atomic. Parent
    directories are created. On failure, temp is removed.

    Args:
        final_path: Destination path.
        content: Text content, written as UTF-8.
    """
    directory = final_path.parent
    directory.mkdir(parents=True, exist_ok=True)
    temp_path = (
        directory / f".{final_path.name}.{os.getpid()}.{uuid.uuid4().hex[:8]}.tmp"
    )
    content_bytes = content.encode("utf-8")
    try:
        fd = os.open(
            str(temp_path),
            os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
            0o644,
        )
        try:
            os.write(fd, content_bytes)
            os.fsync(fd)
        finally:
            os.close(fd)
        os.replace(temp_path, final_path)
        try:
            dir_fd = os.open(str(directory), os.O_RDONLY)
            try:
                os.fsync(dir_fd)
            finally:
                os.close(dir_fd)
        except OSError:
            pass  # e.g. Windows: directory fsync best-effort
    finally:
        temp_path.unlink(missing_ok=True)
