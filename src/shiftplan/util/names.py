from __future__ import annotations

import re

UNKNOWN_REPO: str = "unknown_repo"

_VCS_SUFFIX: str = ".git"


def repo_name_from_url(url: str) -> str:
    """
    Derive a human-readable repository name from a clone URL.

    Accepts strings like:
      - https://github.com/owner/repo.git
      - git@github.com:owner/repo.git
      - /srv/git/repo/

    The final path segment is used, with a trailing ".git" stripped.
    Returns UNKNOWN_REPO when no segment is left.
    """
    segments = [s for s in re.split(r"[/:]", url.strip()) if s]
    if not segments:
        return UNKNOWN_REPO

    name = segments[-1]
    if name.endswith(_VCS_SUFFIX):
        name = name[: -len(_VCS_SUFFIX)]
    return name or UNKNOWN_REPO
