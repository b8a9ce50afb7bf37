"""Output format tags and grammar dispatch.

The grammar is always chosen by an explicit tag; output text is never
inspected to guess which tool produced it.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from benchreport.domain.metrics import Metrics
from benchreport.exceptions import UnsupportedFormatError
from benchreport.parsing.hey import parse_hey
from benchreport.parsing.wrk import parse_wrk


class OutputFormat(str, Enum):
    """Load-testing tools whose output can be parsed."""

    WRK = "wrk"
    HEY = "hey"


DEFAULT_FORMAT = OutputFormat.WRK

_PARSERS: dict[OutputFormat, Callable[[str], Metrics]] = {
    OutputFormat.WRK: parse_wrk,
    OutputFormat.HEY: parse_hey,
}


def resolve_format(output_format: OutputFormat | str) -> OutputFormat:
    """Turn a tag such as "wrk" into an OutputFormat.

    Raises:
        UnsupportedFormatError: If the tag names no known tool.
    """
    if isinstance(output_format, OutputFormat):
        return output_format
    supported = [f.value for f in OutputFormat]
    if not isinstance(output_format, str):
        raise UnsupportedFormatError(str(output_format), supported)
    try:
        return OutputFormat(output_format.lower())
    except ValueError as e:
        raise UnsupportedFormatError(output_format, supported) from e


def get_parser(output_format: OutputFormat | str) -> Callable[[str], Metrics]:
    """Return the parse function registered for a format tag."""
    return _PARSERS[resolve_format(output_format)]
