"""Logging setup for benchreport using loguru.

benchreport's own log records are disabled at import (see ``__init__``) so
library use stays silent. ``setup_logging`` re-enables them and installs
sinks for one of three verbosity modes:
- quiet: WARNING+ only
- normal: INFO+ with simplified format; empty parses are reported here
- verbose: DEBUG+ with full format (timestamps, module names); locator
  misses from the parsers show up here
"""

from __future__ import annotations

import sys
from typing import Literal

from loguru import logger

__all__ = ["VERBOSE_FORMAT", "setup_logging"]

# Full format with timestamps and module info (verbose mode)
VERBOSE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

# Simplified format without timestamps and module info (normal mode)
SIMPLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"

# JSON format for structured logging
JSON_FORMAT = "{message}"

VerbosityType = Literal["quiet", "normal", "verbose"]

_LEVELS: dict[str, str] = {"quiet": "WARNING", "normal": "INFO", "verbose": "DEBUG"}


def setup_logging(
    verbosity: VerbosityType = "normal",
    json_output: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure logging for benchreport.

    Replaces any existing loguru handlers.

    Args:
        verbosity: "quiet", "normal" or "verbose"; usually config.ui.verbosity.
        json_output: If True, output logs as JSON for machine parsing.
        log_file: Optional file path that receives everything at DEBUG level.
    """
    logger.remove()
    logger.enable("benchreport")

    level = _LEVELS[verbosity]

    if json_output:
        logger.add(sys.stderr, format=JSON_FORMAT, serialize=True, level=level)
    else:
        log_format = VERBOSE_FORMAT if verbosity == "verbose" else SIMPLE_FORMAT
        logger.add(sys.stderr, format=log_format, level=level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=VERBOSE_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
        )
