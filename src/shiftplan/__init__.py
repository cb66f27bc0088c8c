"""shiftplan public API."""

from __future__ import annotations

from shiftplan.auth import GitAuth
from shiftplan.config import Settings, get_settings
from shiftplan.errors import (
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
)
from shiftplan.logs import configure_logging
from shiftplan.models import PlanResult, StepResult
from shiftplan.plan import Phase, ShiftPlan, apply_plan, revert_plan
from shiftplan.shift import Shift
from shiftplan.shifts import CreateDir, CreateFile, GitClone, RunCommand

__all__ = [
    # Core
    "Shift",
    "ShiftPlan",
    "apply_plan",
    "revert_plan",
    "Phase",
    # Shifts
    "CreateDir",
    "CreateFile",
    "RunCommand",
    "GitClone",
    "GitAuth",
    # Results
    "PlanResult",
    "StepResult",
    # Config / logging
    "Settings",
    "get_settings",
    "configure_logging",
    # Errors
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
]
