"""Deterministic init error contracts."""

from __future__ import annotations

from enum import StrEnum


class InitErrorCode(StrEnum):
    """Stable init error codes."""

    VALIDATION = "validation_error"
    CANCELLED = "cancelled"
    PROVISIONING = "provisioning_error"
    STEP_FAILED = "step_failed"
    FATAL_PRECONDITION = "fatal_precondition"


class InitError(RuntimeError):
    """Init failure with stable deterministic code."""

    def __init__(
        self,
        code: InitErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create init failure.

        Args:
            code: Stable init error code.
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}


class ProjectValidationError(InitError):
    """Raised when a project name does not match the module name pattern."""

    def __init__(self, name: str) -> None:
        """Create validation failure for a rejected project name.

        Args:
            name: Rejected project name.
        """
        if name:
            message = (
                f"'{name}' is not a valid module name. Please choose a different name"
            )
        else:
            message = "Project name cannot be empty"
        super().__init__(InitErrorCode.VALIDATION, message, data={"name": name})
        self.name = name


class ResolutionCancelled(InitError):
    """Raised when the user cancels an interactive prompt."""

    def __init__(self, field: str) -> None:
        """Create cancellation signal.

        Args:
            field: Field whose prompt was cancelled.
        """
        super().__init__(
            InitErrorCode.CANCELLED,
            f"Cancelled while choosing {field}",
            data={"field": field},
        )
        self.field = field


class ProvisioningError(InitError):
    """Raised by a provisioning step for failures that are not OS errors."""

    def __init__(self, message: str, *, data: dict[str, object] | None = None) -> None:
        """Create provisioning failure.

        Args:
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(InitErrorCode.PROVISIONING, message, data=data)


class StepFailure(InitError):
    """A provisioning step failed; wraps the underlying cause."""

    def __init__(self, step_index: int, step_name: str, cause: BaseException) -> None:
        """Create step failure.

        Args:
            step_index: 1-based position of the failing step.
            step_name: Name of the failing step.
            cause: Original exception raised by the step.
        """
        super().__init__(
            InitErrorCode.STEP_FAILED,
            f"step {step_index} ({step_name}) failed: {cause}",
            data={"step_index": step_index, "step_name": step_name},
        )
        self.step_index = step_index
        self.step_name = step_name
        self.cause = cause


class FatalPrecondition(InitError):
    """Environment precondition that must be fixed by the user before retrying."""

    def __init__(self, message: str, *, data: dict[str, object] | None = None) -> None:
        """Create fatal precondition failure.

        Args:
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(InitErrorCode.FATAL_PRECONDITION, message, data=data)
