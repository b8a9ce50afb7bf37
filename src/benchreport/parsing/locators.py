"""Shared helpers for field locators.

A locator is a compiled pattern plus a small function that pulls one field
out of raw tool output. Locators never raise: a miss yields the field's
default and is logged at DEBUG level.
"""

from __future__ import annotations

import re

from loguru import logger

# Magnitude as printed by load-testing tools: "707", "707.00"
NUMBER = r"\d+(?:\.\d+)?"

# Latency magnitude followed directly by its unit: "814.27us", "8.42ms", "1.02s"
LATENCY_TOKEN = rf"({NUMBER})(us|ms|s)"

# Byte size with optional K/M/G prefix, whitespace allowed before the unit
SIZE_TOKEN = rf"{NUMBER}\s*[KMG]?B"

_WHITESPACE_RE = re.compile(r"\s+")


def first_match(pattern: re.Pattern[str], text: str, field: str) -> re.Match[str] | None:
    """Return the first match of ``pattern`` in ``text``, logging misses.

    Args:
        pattern: Compiled locator pattern.
        text: Raw tool output.
        field: Field name, used only for the debug message.
    """
    match = pattern.search(text)
    if match is None:
        logger.debug(f"Locator miss: no '{field}' in output, using default")
    return match


def first_group(pattern: re.Pattern[str], text: str, field: str) -> str:
    """Return group 1 of the first match, or "" when nothing matches."""
    match = first_match(pattern, text, field)
    return match.group(1) if match else ""


def compact(value: str) -> str:
    """Drop whitespace between a number and its unit ("1.95 GB" -> "1.95GB")."""
    return _WHITESPACE_RE.sub("", value)
