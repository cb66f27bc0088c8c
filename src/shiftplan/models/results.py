"""Result models for plan apply/revert runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, Optional

from shiftplan.util.time import elapsed_seconds


StepStatus = Literal["success", "failed"]
PlanStatus = Literal["success", "failed"]


@dataclass(slots=True)
class StepResult:
    """Result for a single apply or revert attempt on one shift."""

    index: int
    description: str
    phase: str
    status: StepStatus

    error_type: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None


@dataclass(slots=True)
class PlanResult:
    """
    Aggregate result for one apply or revert run of a ShiftPlan.

    Notes:
        - `steps` lists every attempt in the order it happened, rollback
          reverts included.
        - For apply, `error` is always the exception of the shift at
          `failed_index`, never a rollback error.
    """

    run_id: str
    plan_name: str
    phase: str
    status: PlanStatus
    steps: list[StepResult]
    started_at: datetime
    finished_at: datetime

    failed_index: Optional[int] = None
    error: Optional[BaseException] = None
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def duration_seconds(self) -> float:
        return elapsed_seconds(self.started_at, self.finished_at)

    @property
    def applied(self) -> list[int]:
        """Indices whose apply attempt succeeded."""
        return [s.index for s in self.steps if s.phase == "apply" and s.status == "success"]

    @property
    def reverted(self) -> list[int]:
        """Indices whose revert attempt succeeded, in attempt order."""
        return [s.index for s in self.steps if s.phase == "revert" and s.status == "success"]

    @property
    def revert_failures(self) -> list[StepResult]:
        return [s for s in self.steps if s.phase == "revert" and s.status == "failed"]

    def raise_for_status(self) -> None:
        """Re-raise the recorded error if the run failed."""
        if self.error is not None:
            raise self.error
