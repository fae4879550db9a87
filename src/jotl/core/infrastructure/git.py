"""Thin helpers around the git binary."""

from __future__ import annotations

import logging
from pathlib import Path

from jotl.core.errors import ProvisioningError
from jotl.core.infrastructure.run_cmd import CommandRunner, run_subprocess

logger = logging.getLogger(__name__)

GIT_CONFIG_KEY_MISSING = 1


def check_git_config(key: str, *, runner: CommandRunner = run_subprocess) -> bool:
    """Return whether ``git config --get <key>`` has a value.

    Args:
        key: Git config key, e.g. ``user.email``.
        runner: Subprocess runner.

    Returns:
        True when the key is set, False when git reports it missing.

    Raises:
        ProvisioningError: If git exits with any status other than 0 or 1.
        FileNotFoundError: If git is not installed.
    """
    result = runner(["git", "config", "--get", key])
    if result.returncode == 0:
        return True
    if result.returncode == GIT_CONFIG_KEY_MISSING:
        return False
    raise ProvisioningError(
        f"git config --get {key} exited with status {result.returncode}",
        data={"stderr": (result.stderr or "").strip()},
    )


def is_git_directory(directory: Path) -> bool:
    """Return whether ``directory`` holds a ``.git`` entry.

    A ``.git`` file counts too (submodules and worktrees).

    Args:
        directory: Directory to inspect.

    Returns:
        True if ``directory/.git`` exists as a file or directory.
    """
    git_entry = directory / ".git"
    return git_entry.is_dir() or git_entry.is_file()


def init_repository(directory: Path, *, runner: CommandRunner = run_subprocess) -> None:
    """Run ``git init`` inside ``directory``.

    Args:
        directory: Repository root.
        runner: Subprocess runner.

    Raises:
        ProvisioningError: If git exits non-zero.
    """
    result = runner(["git", "init"], cwd=directory)
    if result.returncode != 0:
        raise ProvisioningError(
            f"git init failed with status {result.returncode}",
            data={"stderr": (result.stderr or "").strip()},
        )
    logger.debug("Initialized git repository in %s", directory)
