"""Report rendering for benchreport."""

from benchreport.results.markdown import (
    REPORT_HEADER,
    TABLE_SEPARATOR,
    format_latency,
    format_percentile,
    render_report_table,
    report_cells,
)

__all__ = [
    "REPORT_HEADER",
    "TABLE_SEPARATOR",
    "format_latency",
    "format_percentile",
    "render_report_table",
    "report_cells",
]
