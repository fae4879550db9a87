"""Run a progress indicator next to blocking provisioning work."""

from __future__ import annotations

import logging
from threading import Event, Lock, Thread
from types import TracebackType
from typing import Protocol

logger = logging.getLogger(__name__)


class ProgressIndicator(Protocol):
    """Visual indicator rendered on the auxiliary thread."""

    def run(self, stop: Event) -> None:
        """Render until ``stop`` is set."""

    def release_terminal(self) -> None:
        """Return the terminal to the shell. Must tolerate an exited indicator."""


class ProgressCoordinator:
    """Own the indicator thread and release the terminal exactly once.

    ``release()`` stops and joins the indicator thread before releasing the
    terminal, so nothing printed afterwards interleaves with the indicator.
    It is safe to call more than once, and the context manager calls it on
    every exit path.
    """

    def __init__(self, indicator: ProgressIndicator) -> None:
        """Create coordinator.

        Args:
            indicator: Indicator to render while work is in progress.
        """
        self._indicator = indicator
        self._stop = Event()
        self._lock = Lock()
        self._thread: Thread | None = None
        self._released = False
        self._error: BaseException | None = None

    @property
    def released(self) -> bool:
        return self._released

    @property
    def error(self) -> BaseException | None:
        """Exception raised by the indicator thread, if any."""
        return self._error

    def start(self) -> None:
        """Start the indicator thread.

        Raises:
            RuntimeError: If already started or already released.
        """
        with self._lock:
            if self._released:
                raise RuntimeError("progress coordinator already released")
            if self._thread is not None:
                raise RuntimeError("progress coordinator already started")
            self._thread = Thread(
                target=self._render, name="jotl-progress", daemon=True
            )
            self._thread.start()

    def release(self) -> None:
        """Stop the indicator, wait for its thread, then release the terminal."""
        with self._lock:
            if self._released:
                return
            self._released = True
            self._stop.set()
            if self._thread is not None:
                self._thread.join()
            try:
                self._indicator.release_terminal()
            except Exception:  # noqa: BLE001
                logger.exception("Problem releasing terminal")
        if self._error is not None:
            logger.warning("Progress indicator stopped with an error: %s", self._error)

    def _render(self) -> None:
        try:
            self._indicator.run(self._stop)
        except Exception as exc:  # noqa: BLE001
            self._error = exc

    def __enter__(self) -> ProgressCoordinator:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
