"""Logging configuration shared by the command line tools."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# TENTWENTY_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL_ENV = "TENTWENTY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def default_log_level() -> str:
    """Return the level named by ``TENTWENTY_LOG_LEVEL`` or the default."""

    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)


def parse_level(level: str) -> int:
    """Return the numeric logging level for ``level``."""

    levels = logging.getLevelNamesMapping()
    name = level.strip().upper()
    if name not in levels:
        choices = ", ".join(sorted(levels, key=levels.__getitem__))
        raise ValueError(f"unknown log level {level!r}; expected one of {choices}")
    return levels[name]


def setup_logging(level: str | None = None, *, console: Console | None = None) -> None:
    """Call once at program start."""

    logging.basicConfig(
        level=parse_level(level if level is not None else default_log_level()),
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )
