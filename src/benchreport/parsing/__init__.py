"""Load-test output parsing for benchreport."""

from benchreport.parsing.extractor import extract_metrics
from benchreport.parsing.formats import DEFAULT_FORMAT, OutputFormat, get_parser, resolve_format
from benchreport.parsing.hey import parse_hey
from benchreport.parsing.units import normalize_latency, parse_latency_token
from benchreport.parsing.wrk import parse_wrk

__all__ = [
    "DEFAULT_FORMAT",
    "OutputFormat",
    "extract_metrics",
    "get_parser",
    "normalize_latency",
    "parse_hey",
    "parse_latency_token",
    "parse_wrk",
    "resolve_format",
]
