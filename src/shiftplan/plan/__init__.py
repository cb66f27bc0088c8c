"""Public plan exports for shiftplan."""

from __future__ import annotations

from .executor import apply_plan, revert_plan
from .phases import Phase
from .shift_plan import ShiftPlan

__all__ = [
    "Phase",
    "ShiftPlan",
    "apply_plan",
    "revert_plan",
]
