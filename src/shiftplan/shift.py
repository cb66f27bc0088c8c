"""The Shift capability every provisioning action implements."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shift(Protocol):
    """
    One reversible, describable provisioning action.

    Implementations raise shiftplan errors (ShiftError subclasses) on failure.
    A variant that cannot meaningfully revert or observe its state raises
    NotRevertibleError / NotCheckableError instead of silently succeeding, so
    callers can treat every shift the same way.
    """

    def apply(self) -> None:
        """Perform the forward effect."""
        ...

    def revert(self) -> None:
        """Undo the forward effect."""
        ...

    def is_applied(self) -> bool:
        """Report whether the forward effect is currently observable. No side effects."""
        ...

    def describe(self) -> str:
        """Return a stable human-readable summary. Must not raise."""
        ...
