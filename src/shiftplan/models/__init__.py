"""Public model exports for shiftplan."""

from __future__ import annotations

from .results import PlanResult, PlanStatus, StepResult, StepStatus

__all__ = [
    "StepStatus",
    "PlanStatus",
    "StepResult",
    "PlanResult",
]
