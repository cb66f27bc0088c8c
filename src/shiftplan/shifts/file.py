"""CreateFile shift."""

from __future__ import annotations

import os
from dataclasses import dataclass

from shiftplan.errors import AlreadyExistsError, wrap_os_error

from .validators import ensure_regular_file


@dataclass(frozen=True, slots=True)
class CreateFile:
    """
    Write a new file with the given content.

    An existing path is always an error, even when its content matches.
    """

    path: str
    content: str
    encoding: str = "utf-8"

    def apply(self) -> None:
        if os.path.lexists(self.path):
            raise AlreadyExistsError(
                f"File {self.path} already exists",
                details={"path": self.path},
            )

        try:
            # "x" refuses to clobber a path created after the check above.
            with open(self.path, "x", encoding=self.encoding) as f:
                f.write(self.content)
        except FileExistsError as exc:
            raise AlreadyExistsError(
                f"File {self.path} already exists",
                details={"path": self.path},
                cause=exc,
            ) from exc
        except OSError as exc:
            raise wrap_os_error(exc, path=self.path, operation="write file") from exc

    def revert(self) -> None:
        if not os.path.lexists(self.path):
            return

        ensure_regular_file(self.path, "Path")
        try:
            os.remove(self.path)
        except OSError as exc:
            raise wrap_os_error(exc, path=self.path, operation="remove file") from exc

    def is_applied(self) -> bool:
        return os.path.isfile(self.path)

    def describe(self) -> str:
        return f"Create file at {self.path}"
