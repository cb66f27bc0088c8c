"""GitClone composite shift."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from shiftplan.auth import GitAuth
from shiftplan.config import get_settings
from shiftplan.plan import ShiftPlan
from shiftplan.util.names import repo_name_from_url

from .command import RunCommand
from .directory import CreateDir


@dataclass(frozen=True, slots=True)
class GitClone:
    """
    Clone a git repository into a target directory.

    Implemented as a nested ShiftPlan [CreateDir(target_dir), git clone],
    rebuilt on every call. Reverting attempts the clone command first, which
    fails as not revertible, then removes the directory and raises
    RevertFailedError for the command.
    """

    repo_url: str
    target_dir: str
    branch: Optional[str] = None
    depth: Optional[int] = None
    auth: Optional[GitAuth] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.repo_url, str) or not self.repo_url.strip():
            raise ValueError("GitClone.repo_url must be a non-empty string")
        if not isinstance(self.target_dir, str) or not self.target_dir.strip():
            raise ValueError("GitClone.target_dir must be a non-empty string")
        if self.depth is not None:
            if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 1:
                raise ValueError("GitClone.depth must be a positive integer")

    @property
    def repo_name(self) -> str:
        return repo_name_from_url(self.repo_url)

    def build_plan(self) -> ShiftPlan:
        args = ["clone"]
        if self.branch:
            args += ["--branch", self.branch]
        if self.depth is not None:
            args += ["--depth", str(self.depth)]
        args += [self.repo_url, self.target_dir]

        clone = RunCommand(
            get_settings().git_executable,
            args,
            env=self.auth.to_env() if self.auth is not None else None,
        )
        return ShiftPlan(
            name=f"Clone repository {self.repo_name}",
            description=self.describe(),
            shifts=[CreateDir(self.target_dir), clone],
        )

    def apply(self) -> None:
        self.build_plan().apply()

    def revert(self) -> None:
        self.build_plan().revert()

    def is_applied(self) -> bool:
        return os.path.isdir(self.target_dir)

    def describe(self) -> str:
        return f"Clone repository {self.repo_name} into directory {self.target_dir}"
