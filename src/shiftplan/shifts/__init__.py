"""Public shift exports for shiftplan."""

from __future__ import annotations

from shiftplan.shift import Shift

from .clone import GitClone
from .command import RunCommand
from .directory import CreateDir
from .file import CreateFile
from .validators import (
    ensure_directory,
    ensure_empty_directory,
    ensure_not_symlink,
    ensure_regular_file,
)

__all__ = [
    "Shift",
    "CreateDir",
    "CreateFile",
    "RunCommand",
    "GitClone",
    "ensure_directory",
    "ensure_empty_directory",
    "ensure_not_symlink",
    "ensure_regular_file",
]
