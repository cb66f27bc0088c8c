"""Library configuration via environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """shiftplan configuration loaded from environment variables."""

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Command execution
    command_timeout_seconds: Optional[float] = None  # None waits forever
    git_executable: str = "git"

    model_config = {
        "env_prefix": "SHIFTPLAN_",
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loaded on first use."""
    return Settings()
