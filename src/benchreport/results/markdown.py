"""Markdown comparison table for load-test reports."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from benchreport.constants import LATENCY_DECIMALS, MISSING_PERCENTILE, REPORT_COLUMNS
from benchreport.domain.metrics import Report

REPORT_HEADER = "| " + " | ".join(REPORT_COLUMNS) + " |"
TABLE_SEPARATOR = "|" + "---|" * len(REPORT_COLUMNS)


def format_latency(value: float) -> str:
    """Format a latency in ms, e.g. 0.8143 -> "0.8143ms"."""
    return f"{value:.{LATENCY_DECIMALS}f}ms"


def format_percentile(value: float) -> str:
    """Format a percentile latency, using the placeholder when it was not reported."""
    return format_latency(value) if value > 0.0 else MISSING_PERCENTILE


def report_cells(report: Report) -> list[str]:
    """Return the cells of one table row, in REPORT_COLUMNS order."""
    latency = report.metrics.latency
    request = report.metrics.request
    transfer = report.metrics.transfer
    return [
        report.framework_name,
        format_latency(latency.avg),
        format_latency(latency.stdev),
        format_percentile(latency.p50),
        format_percentile(latency.p75),
        format_percentile(latency.p90),
        format_percentile(latency.p99),
        format_latency(latency.max),
        request.total,
        request.req_per_sec,
        transfer.total,
        transfer.rate,
        report.max_memory,
    ]


def render_row(cells: Sequence[str]) -> str:
    return "|" + "|".join(cells) + "|"


def render_report_table(reports: Sequence[Report]) -> str:
    """Render reports as a markdown table.

    Rows follow the order of ``reports``. The result has no trailing newline.

    Args:
        reports: Reports to render, one row each.

    Returns:
        Header line, separator line, then one line per report.
    """
    lines = [REPORT_HEADER, TABLE_SEPARATOR]
    lines.extend(render_row(report_cells(report)) for report in reports)
    logger.debug(f"Rendered report table with {len(reports)} rows")
    return "\n".join(lines)
