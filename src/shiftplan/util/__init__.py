from .ids import new_run_id, new_uuid
from .names import UNKNOWN_REPO, repo_name_from_url
from .time import elapsed_seconds, now_utc

__all__ = [
    "new_uuid",
    "new_run_id",
    "UNKNOWN_REPO",
    "repo_name_from_url",
    "now_utc",
    "elapsed_seconds",
]
