"""Strict on-disk validation helpers for leaf shifts."""

from __future__ import annotations

import os

from shiftplan.errors import ValidationFailedError


def ensure_directory(path: str, what: str) -> None:
    if not os.path.isdir(path):
        raise ValidationFailedError(
            f"{what} is not a directory: {path}",
            details={"path": path},
        )


def ensure_regular_file(path: str, what: str) -> None:
    if not os.path.isfile(path):
        raise ValidationFailedError(
            f"{what} is not a file: {path}",
            details={"path": path},
        )


def ensure_empty_directory(path: str, what: str) -> None:
    ensure_directory(path, what)
    with os.scandir(path) as entries:
        if next(entries, None) is not None:
            raise ValidationFailedError(
                f"{what} is not empty: {path}",
                details={"path": path},
            )


def ensure_not_symlink(path: str, what: str) -> None:
    if os.path.islink(path):
        raise ValidationFailedError(
            f"{what} is a symbolic link: {path}",
            details={"path": path},
        )
