from __future__ import annotations

import uuid


def new_uuid() -> str:
    """Generate a UUID4 string."""
    return str(uuid.uuid4())


def new_run_id() -> str:
    """Generate an ID for one apply/revert invocation of a plan."""
    return new_uuid()
