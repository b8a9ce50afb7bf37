"""Metrics extraction entry point."""

from __future__ import annotations

from loguru import logger

from benchreport.domain.metrics import Metrics
from benchreport.exceptions import ParseError
from benchreport.parsing.formats import DEFAULT_FORMAT, OutputFormat, get_parser, resolve_format


def extract_metrics(
    raw_text: str,
    output_format: OutputFormat | str = DEFAULT_FORMAT,
    strict: bool = False,
) -> Metrics:
    """Parse one run's output into a Metrics record.

    Lenient by default: fields that cannot be located fall back to their
    defaults and the call succeeds, even for empty input.

    Args:
        raw_text: Captured stdout of one load-testing run.
        output_format: Tool that produced the output.
        strict: Raise instead of returning a record with every field defaulted.

    Returns:
        Parsed metrics.

    Raises:
        UnsupportedFormatError: If output_format is unknown.
        ParseError: In strict mode, if no field could be located.
    """
    fmt = resolve_format(output_format)
    metrics = get_parser(fmt)(raw_text)

    if metrics.is_empty:
        if strict:
            raise ParseError(f"No {fmt.value} metrics found in output", output_format=fmt.value)
        logger.warning(f"No {fmt.value} metrics found in output; all fields defaulted")
    elif not metrics.latency.has_distribution:
        logger.debug(f"{fmt.value} output has no latency distribution; percentiles absent")

    return metrics
