"""Apply/revert algorithms for ShiftPlan."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

import structlog

from shiftplan.errors import RevertFailedError, RevertFailure
from shiftplan.models import PlanResult, StepResult
from shiftplan.shift import Shift
from shiftplan.util.ids import new_run_id
from shiftplan.util.time import now_utc

from .phases import Phase

if TYPE_CHECKING:
    from .shift_plan import ShiftPlan

logger = structlog.get_logger()


def apply_plan(plan: ShiftPlan) -> PlanResult:
    """
    Apply the shifts of `plan` in order.

    Policy:
        - Stop at the first shift whose apply raises.
        - Revert the already-applied prefix in reverse order. Every revert is
          attempted even if an earlier one fails (best-effort, exhaustive).
        - The returned result carries the original exception; it never raises
          for shift failures.
    """
    run_id = new_run_id()
    log = logger.bind(plan=plan.name, run_id=run_id)
    started_at = now_utc()
    steps: list[StepResult] = []
    applied: list[tuple[int, Shift, str]] = []

    log.info("plan_apply_started", description=plan.description, shifts=len(plan.shifts))

    for index, shift in enumerate(plan.shifts):
        description = shift.describe()
        log.info("shift_applying", index=index, shift=description)
        try:
            shift.apply()
        except Exception as exc:
            log.error(
                "shift_apply_failed",
                index=index,
                shift=description,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            steps.append(_failed_step(index, description, Phase.APPLY, exc))
            _rollback(applied, steps, log)
            log.error("plan_apply_failed", failed_index=index, rolled_back=len(applied))
            return _plan_result(
                run_id,
                plan,
                Phase.APPLY,
                steps,
                started_at,
                failed_index=index,
                error=exc,
            )

        steps.append(_success_step(index, description, Phase.APPLY))
        applied.append((index, shift, description))
        log.info("shift_applied", index=index, shift=description)

    result = _plan_result(run_id, plan, Phase.APPLY, steps, started_at)
    log.info("plan_applied", shifts=len(plan.shifts), duration=result.duration_seconds)
    return result


def revert_plan(plan: ShiftPlan) -> PlanResult:
    """
    Revert every shift of `plan` in reverse order.

    There is no record of what was applied before, so each shift's own
    no-op-if-absent behavior is relied on. Failures are accumulated and
    reported together as RevertFailedError.
    """
    run_id = new_run_id()
    log = logger.bind(plan=plan.name, run_id=run_id)
    started_at = now_utc()
    steps: list[StepResult] = []
    failures: list[RevertFailure] = []

    log.info("plan_revert_started", description=plan.description, shifts=len(plan.shifts))

    for index in reversed(range(len(plan.shifts))):
        shift = plan.shifts[index]
        description = shift.describe()
        exc = _revert_one(index, shift, description, steps, log)
        if exc is not None:
            failures.append(RevertFailure(description=description, error=exc))

    if failures:
        error = RevertFailedError(failures, details={"plan": plan.name})
        log.error("plan_revert_failed", failed=len(failures))
        return _plan_result(run_id, plan, Phase.REVERT, steps, started_at, error=error)

    result = _plan_result(run_id, plan, Phase.REVERT, steps, started_at)
    log.info("plan_reverted", shifts=len(plan.shifts), duration=result.duration_seconds)
    return result


# ----------------------------
# Internals
# ----------------------------
def _rollback(
    applied: list[tuple[int, Shift, str]],
    steps: list[StepResult],
    log: structlog.typing.FilteringBoundLogger,
) -> None:
    if not applied:
        return
    log.warning("rollback_started", shifts=len(applied))
    for index, shift, description in reversed(applied):
        _revert_one(index, shift, description, steps, log)


def _revert_one(
    index: int,
    shift: Shift,
    description: str,
    steps: list[StepResult],
    log: structlog.typing.FilteringBoundLogger,
) -> Optional[Exception]:
    log.info("shift_reverting", index=index, shift=description)
    try:
        shift.revert()
    except Exception as exc:
        log.error(
            "shift_revert_failed",
            index=index,
            shift=description,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        steps.append(_failed_step(index, description, Phase.REVERT, exc))
        return exc

    steps.append(_success_step(index, description, Phase.REVERT))
    log.info("shift_reverted", index=index, shift=description)
    return None


def _success_step(index: int, description: str, phase: Phase) -> StepResult:
    return StepResult(
        index=index,
        description=description,
        phase=phase.value,
        status="success",
    )


def _failed_step(index: int, description: str, phase: Phase, exc: Exception) -> StepResult:
    return StepResult(
        index=index,
        description=description,
        phase=phase.value,
        status="failed",
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=_copy_details(exc),
    )


def _copy_details(exc: Exception) -> Optional[dict[str, Any]]:
    details = getattr(exc, "details", None)
    if not isinstance(details, dict):
        return None
    return dict(details)


def _plan_result(
    run_id: str,
    plan: ShiftPlan,
    phase: Phase,
    steps: list[StepResult],
    started_at: datetime,
    *,
    failed_index: Optional[int] = None,
    error: Optional[Exception] = None,
) -> PlanResult:
    return PlanResult(
        run_id=run_id,
        plan_name=plan.name,
        phase=phase.value,
        status="failed" if error is not None else "success",
        steps=steps,
        started_at=started_at,
        finished_at=now_utc(),
        failed_index=failed_index,
        error=error,
        summary=_summarize_steps(steps),
    )


def _summarize_steps(steps: list[StepResult]) -> dict[str, int]:
    summary: dict[str, int] = {
        "apply_success": 0,
        "apply_failed": 0,
        "revert_success": 0,
        "revert_failed": 0,
    }
    for s in steps:
        key = f"{s.phase}_{s.status}"
        summary[key] = summary.get(key, 0) + 1
    return summary
