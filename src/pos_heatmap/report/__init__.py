"""Report assembly on top of the pivot and heatmap.

Example:
    >>> from pos_heatmap.adapters import read_rows
    >>> from pos_heatmap.report import build_report, format_report_for_console
    >>> report = build_report(read_rows("sales_export.csv"))
    >>> print(format_report_for_console(report))
"""

from pos_heatmap.report.api import SalesReport, build_report
from pos_heatmap.report.console import format_report_for_console
from pos_heatmap.report.summary import (
    SummaryLine,
    format_currency,
    format_quantity,
    product_breakdown,
    summary_lines,
)

__all__ = [
    "SalesReport",
    "SummaryLine",
    "build_report",
    "format_currency",
    "format_quantity",
    "format_report_for_console",
    "product_breakdown",
    "summary_lines",
]
