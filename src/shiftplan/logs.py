"""structlog setup for applications that embed shiftplan."""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from shiftplan.config import get_settings


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog for plan progress output.

    Args:
        level: Minimum level name (e.g. "DEBUG"). Defaults to Settings.log_level.
        fmt: "console" or "json". Defaults to Settings.log_format.

    Raises:
        ValueError: if level or fmt is not recognized.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    fmt = fmt or settings.log_format
    if fmt == "json":
        renderer: structlog.typing.Processor = structlog.processors.JSONRenderer()
    elif fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        raise ValueError(f"Unknown log format: {fmt}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
