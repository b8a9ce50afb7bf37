"""Terminal display of report tables using rich."""

from __future__ import annotations

import os
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape as rich_escape
from rich.table import Table

from benchreport.constants import REPORT_COLUMNS
from benchreport.domain.metrics import Report
from benchreport.results.markdown import report_cells

console = Console(no_color=os.environ.get("NO_COLOR") == "1")


def build_reports_table(reports: Sequence[Report], title: str | None = None) -> Table:
    """Build a rich Table with the same columns and cells as the markdown table."""
    table = Table(title=title)
    table.add_column(REPORT_COLUMNS[0], style="cyan")
    for column in REPORT_COLUMNS[1:]:
        table.add_column(column, justify="right")

    for report in reports:
        table.add_row(*(rich_escape(cell) for cell in report_cells(report)))

    return table


def show_reports(reports: Sequence[Report], title: str | None = None) -> None:
    """Print reports to the console."""
    if not reports:
        console.print("[yellow]No reports to display[/yellow]")
        return
    console.print(build_reports_table(reports, title=title))
