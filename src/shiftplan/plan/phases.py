"""Execution phases recorded in plan results."""

from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    """Which half of the shift contract a step invoked."""

    APPLY = "apply"
    REVERT = "revert"
