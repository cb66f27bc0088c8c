"""RunCommand shift."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from shiftplan.config import get_settings
from shiftplan.errors import CommandFailedError, NotCheckableError, NotRevertibleError


@dataclass(frozen=True, slots=True)
class RunCommand:
    """
    Run an external program and wait for it to exit.

    Notes:
        - Not idempotent: every apply runs the program again.
        - revert and is_applied always raise; arbitrary programs are not
          assumed reversible and leave no state this shift can check.
        - `env` is merged over the current environment and never shown by
          describe().
    """

    command: str
    args: Sequence[str] = ()
    working_dir: Optional[str] = None
    success_exit_codes: Sequence[int] = (0,)
    timeout: Optional[float] = None
    env: Optional[Mapping[str, str]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.command, str) or not self.command.strip():
            raise ValueError("RunCommand.command must be a non-empty string")
        if isinstance(self.args, str):
            raise TypeError("RunCommand.args must be a sequence of strings, not a string")
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "success_exit_codes", tuple(self.success_exit_codes))
        if not self.success_exit_codes:
            raise ValueError("RunCommand.success_exit_codes must not be empty")

    def apply(self) -> None:
        timeout = self.timeout
        if timeout is None:
            timeout = get_settings().command_timeout_seconds

        env = None
        if self.env is not None:
            env = {**os.environ, **self.env}

        try:
            completed = subprocess.run(
                [self.command, *self.args],
                cwd=self.working_dir,
                env=env,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandFailedError(
                f"Command '{self.command}' timed out after {timeout} seconds",
                command=self.command,
                stderr=_as_text(exc.stderr),
                details={"timeout": timeout},
                cause=exc,
            ) from exc
        except OSError as exc:
            raise CommandFailedError(
                f"Command '{self.command}' could not be started: {exc}",
                command=self.command,
                details={"working_dir": self.working_dir},
                cause=exc,
            ) from exc

        if completed.returncode not in self.success_exit_codes:
            stderr = _as_text(completed.stderr)
            raise CommandFailedError(
                f"Command '{self.command}' failed with exit code "
                f"{completed.returncode}. Stderr: {stderr}",
                command=self.command,
                exit_code=completed.returncode,
                stderr=stderr,
                details={"accepted_exit_codes": list(self.success_exit_codes)},
            )

    def revert(self) -> None:
        raise NotRevertibleError(
            "Cannot automatically revert a command execution",
            details={"command": self.command},
        )

    def is_applied(self) -> bool:
        raise NotCheckableError(
            "Cannot check if a command has been applied",
            details={"command": self.command},
        )

    def describe(self) -> str:
        text = f"Execute command '{self.command}' with args {list(self.args)}"
        if self.working_dir is not None:
            text += f" in directory {self.working_dir}"
        return text


def _as_text(value: bytes | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value
