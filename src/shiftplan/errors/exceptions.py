"""Exception hierarchy and OS error wrapping for shiftplan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class ShiftError(Exception):
    """
    Base exception for shiftplan.

    Attributes:
        details: Optional structured information (e.g., path, exit code).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class IOFailureError(ShiftError):
    """Raised when an underlying OS-level call fails."""


class CommandFailedError(ShiftError):
    """
    Raised when an external command cannot be launched or exits with a code
    outside the accepted set.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str,
        exit_code: Optional[int] = None,
        stderr: str = "",
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        merged: dict[str, Any] = {"command": command, "exit_code": exit_code}
        if details:
            merged.update(details)
        super().__init__(message, details=merged, cause=cause)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class ValidationFailedError(ShiftError):
    """Raised when the observed on-disk state contradicts what a shift expects."""


class AlreadyExistsError(ShiftError):
    """Raised when the target conflicts with a creation precondition."""


class NotFoundError(ShiftError):
    """Raised when a looked-up resource does not exist."""


class CustomError(ShiftError):
    """Catch-all for failures that fit no other kind."""


class NotRevertibleError(CustomError):
    """Raised when a shift has no meaningful way to undo its effect."""


class NotCheckableError(CustomError):
    """Raised when a shift has no persistent state that can be observed."""


@dataclass(frozen=True)
class RevertFailure:
    """One shift that failed to revert, keyed by its description."""

    description: str
    error: BaseException


class RevertFailedError(CustomError):
    """
    Aggregate failure raised when one or more shifts of a plan failed to revert.

    Attributes:
        failures: Every (description, error) pair, in the order reverts were
            attempted.
    """

    def __init__(
        self,
        failures: list[RevertFailure],
        *,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        joined = ", ".join(f"{f.description}: {f.error}" for f in failures)
        super().__init__(
            f"Failed to revert some shifts: {joined}",
            details=details,
        )
        self.failures = list(failures)


def wrap_os_error(
    exc: OSError,
    *,
    path: str,
    operation: str,
) -> IOFailureError:
    """
    Wrap an OSError raised while touching `path` into IOFailureError.

    The returned error keeps `exc` as its cause; callers should still
    `raise ... from exc`.
    """
    details: dict[str, Any] = {
        "path": path,
        "operation": operation,
        "errno": exc.errno,
        "strerror": exc.strerror,
    }
    reason = exc.strerror or str(exc) or exc.__class__.__name__
    return IOFailureError(f"Failed to {operation} {path}: {reason}", details=details, cause=exc)
