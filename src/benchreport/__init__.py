"""benchreport -- load-test output parsing and markdown comparison tables.

Public API:
    parse_metrics, build_report, render_report_table, configure, Metrics,
    Report, OutputFormat, __version__

Log output from benchreport is disabled until configure() (or
benchreport.logging.setup_logging) is called.
"""

from loguru import logger

from benchreport._api import build_report, configure, parse_metrics, render_report_table
from benchreport.domain.metrics import Metrics, Report
from benchreport.parsing.formats import OutputFormat

logger.disable("benchreport")

__version__: str = "0.3.0"

__all__ = [
    "Metrics",
    "OutputFormat",
    "Report",
    "__version__",
    "build_report",
    "configure",
    "parse_metrics",
    "render_report_table",
]
