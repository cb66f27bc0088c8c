"""Public error exports for shiftplan."""

from __future__ import annotations

from .exceptions import (
    AlreadyExistsError,
    CommandFailedError,
    CustomError,
    IOFailureError,
    NotCheckableError,
    NotFoundError,
    NotRevertibleError,
    RevertFailedError,
    RevertFailure,
    ShiftError,
    ValidationFailedError,
    wrap_os_error,
)

__all__ = [
    "ShiftError",
    "IOFailureError",
    "CommandFailedError",
    "ValidationFailedError",
    "AlreadyExistsError",
    "NotFoundError",
    "CustomError",
    "NotRevertibleError",
    "NotCheckableError",
    "RevertFailedError",
    "RevertFailure",
    "wrap_os_error",
]
