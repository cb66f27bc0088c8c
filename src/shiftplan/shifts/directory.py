"""CreateDir shift."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass

from shiftplan.errors import AlreadyExistsError, wrap_os_error

from .validators import ensure_directory, ensure_empty_directory, ensure_not_symlink


@dataclass(frozen=True, slots=True)
class CreateDir:
    """
    Create one directory level (ancestors are not created).

    Notes:
        - apply is idempotent: an existing directory counts as success.
        - revert removes the whole subtree by default, including content that
          was there before apply. Pass recursive_revert=False to only remove
          the directory when it is empty.
    """

    path: str
    recursive_revert: bool = True

    def apply(self) -> None:
        if os.path.lexists(self.path):
            if os.path.isdir(self.path):
                return
            raise AlreadyExistsError(
                f"Path {self.path} exists but is not a directory",
                details={"path": self.path},
            )

        try:
            os.mkdir(self.path)
        except OSError as exc:
            raise wrap_os_error(exc, path=self.path, operation="create directory") from exc

    def revert(self) -> None:
        if not os.path.lexists(self.path):
            return

        ensure_not_symlink(self.path, "Path")
        if self.recursive_revert:
            ensure_directory(self.path, "Path")
        else:
            ensure_empty_directory(self.path, "Path")

        try:
            if self.recursive_revert:
                shutil.rmtree(self.path)
            else:
                os.rmdir(self.path)
        except OSError as exc:
            raise wrap_os_error(exc, path=self.path, operation="remove directory") from exc

    def is_applied(self) -> bool:
        return os.path.isdir(self.path)

    def describe(self) -> str:
        return f"Create directory at {self.path}"
