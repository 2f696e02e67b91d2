"""Console output formatting for sales reports."""

from __future__ import annotations

from pos_heatmap.report.api import SalesReport
from pos_heatmap.report.summary import format_currency, format_quantity


def _format_cell(value: object) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_quantity(value)
    return str(value)


def format_report_for_console(report: SalesReport) -> str:
    """Build a human-readable text view of the pivot, summary and breakdown.

    Args:
        report: SalesReport from build_report().

    Returns:
        Plain text with aligned pivot columns.
    """
    result = report.aggregation
    lines = []

    lines.append("Sales by Location / Product / Day")
    lines.append("=" * 60)

    if not result.table:
        lines.append("No sales rows to report.")
    else:
        rendered = [[_format_cell(v) for v in row] for row in report.rows]
        widths = [max(len(row[i]) for row in rendered) for i in range(result.width)]
        for row in rendered:
            cells = [
                cell.ljust(w) if i < 2 else cell.rjust(w)
                for i, (cell, w) in enumerate(zip(row, widths))
            ]
            lines.append("  ".join(cells).rstrip())

    lines.append("")
    lines.append("Summary:")
    lines.append("-" * 60)
    for line in report.summary:
        lines.append(f"  {line.label}: {line.display}")

    lines.append("")
    lines.append("Products:")
    lines.append("-" * 60)
    for rollup in report.breakdown:
        parts = [f"qty {format_quantity(rollup.quantity)}"]
        if rollup.sales is not None:
            parts.append(f"sales {format_currency(rollup.sales)}")
        if rollup.gross is not None:
            parts.append(f"gross {format_currency(rollup.gross)}")
        lines.append(f"  {rollup.product}: {', '.join(parts)}")

    return "\n".join(lines)
