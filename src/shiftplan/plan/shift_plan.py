"""ShiftPlan model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from shiftplan.shift import Shift

from .executor import apply_plan, revert_plan


@dataclass(frozen=True, slots=True)
class ShiftPlan:
    """
    A named, ordered sequence of shifts applied as a unit.

    The sequence is frozen into a tuple at construction. A ShiftPlan is
    itself a Shift, so plans nest without special handling.
    """

    name: str
    description: str
    shifts: Sequence[Shift] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("ShiftPlan.name must be a non-empty string")
        if not isinstance(self.description, str):
            raise TypeError("ShiftPlan.description must be a string")

        shifts = tuple(self.shifts)
        for pos, shift in enumerate(shifts):
            if not isinstance(shift, Shift):
                raise TypeError(
                    f"ShiftPlan.shifts[{pos}] does not implement Shift: {shift!r}"
                )
        object.__setattr__(self, "shifts", shifts)

    def __len__(self) -> int:
        return len(self.shifts)

    def apply(self) -> None:
        """
        Apply every shift in order, rolling back on the first failure.

        Raises:
            The original exception of the shift that failed. Rollback failures
            are logged and recorded but never replace it.
        """
        apply_plan(self).raise_for_status()

    def revert(self) -> None:
        """
        Revert every shift in reverse order.

        Raises:
            RevertFailedError: if one or more shifts failed to revert.
        """
        revert_plan(self).raise_for_status()

    def is_applied(self) -> bool:
        """True when every shift reports applied. Errors from shifts propagate."""
        return all(shift.is_applied() for shift in self.shifts)

    def describe(self) -> str:
        return f"{self.name}: {self.description}"
