"""Single place for subprocess invocation.

Uses shell=False and list args. All bandit suppressions live here.
"""

from __future__ import annotations

import os
import subprocess  # nosec B404 - used with shell=False, list args
from collections.abc import Callable, Sequence
from pathlib import Path

CommandRunner = Callable[..., "subprocess.CompletedProcess[str]"]


def inherited_env() -> dict[str, str]:
    """Copy of the current environment.

    git and the package-fetch tool read HOME, GOPATH and friends, so the full
    environment is passed through.

    Returns:
        Mutable copy of ``os.environ``.
    """
    return dict(os.environ)


def run_subprocess(
    argv: Sequence[str],
    *,
    cwd: str | Path | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a subprocess with shell=False and list args.

    Returncode is not checked; caller inspects result.returncode.

    Args:
        argv: Command and arguments as a list (no shell parsing).
        cwd: Working directory for the subprocess.
        env: Environment dict; defaults to inherited_env() if None.
        timeout: Optional timeout in seconds.

    Returns:
        CompletedProcess with stdout, stderr, returncode.

    Raises:
        FileNotFoundError: If the executable is not installed.
        subprocess.TimeoutExpired: If the command exceeds ``timeout``.
    """
    return subprocess.run(  # noqa: PLW1510  # nosec B603 - shell=False, list args
        list(argv),
        cwd=str(cwd) if cwd is not None else None,
        env=env or inherited_env(),
        capture_output=True,
        text=True,
        timeout=timeout,
        shell=False,
    )
