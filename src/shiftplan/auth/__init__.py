"""Public auth exports for shiftplan."""

from __future__ import annotations

from .git_auth import GitAuth

__all__ = ["GitAuth"]
