"""Write finished reports to files.

Two sinks are provided:

- **ExcelReportWriter**: a workbook with a "Pivot" sheet carrying the
  heatmap fills and a "Summary" sheet with totals and the product breakdown.
- **CsvTableWriter**: the pivot table only, as plain CSV.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import pandas as pd
from openpyxl import Workbook
from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from pos_heatmap.heatmap import Color
from pos_heatmap.pivot.aggregate import LABEL_COLUMNS
from pos_heatmap.report.api import SalesReport

logger = logging.getLogger(__name__)

CURRENCY_FORMAT = '"$"#,##0.00'
THIN = Side(style="thin", color="BFBFBF")
CELL_BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)
HEADER_FONT = Font(bold=True)
MAX_COLUMN_WIDTH = 50


class TabularSink(Protocol):
    """Anything that can persist a SalesReport to a path."""

    def write(self, report: SalesReport, path: Path) -> Path: ...


def _fill(color: Color) -> PatternFill:
    rgb = color.hex.lstrip("#")
    return PatternFill(start_color=rgb, end_color=rgb, fill_type="solid")


def _keep_text(cell: Cell) -> None:
    """Store text starting with "=" as a string rather than a formula."""
    if isinstance(cell.value, str) and cell.value.startswith("="):
        cell.data_type = "s"


def _autosize(ws: Worksheet) -> None:
    """Fit each column to its longest rendered value."""
    for column in ws.columns:
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        letter = get_column_letter(column[0].column)
        ws.column_dimensions[letter].width = min(longest + 2, MAX_COLUMN_WIDTH)


class ExcelReportWriter:
    """Write a SalesReport to an .xlsx workbook with heatmap fills."""

    def __init__(self, pivot_sheet: str = "Pivot", summary_sheet: str = "Summary") -> None:
        self.pivot_sheet = pivot_sheet
        self.summary_sheet = summary_sheet

    def write(self, report: SalesReport, path: Path) -> Path:
        wb = Workbook()
        pivot_ws = wb.active
        pivot_ws.title = self.pivot_sheet
        self._write_pivot(pivot_ws, report)
        self._write_summary(wb.create_sheet(self.summary_sheet), report)

        path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(path)
        logger.info("Wrote workbook: %s", path)
        return path

    def _write_pivot(self, ws: Worksheet, report: SalesReport) -> None:
        for r, (row, colors) in enumerate(zip(report.rows, report.colors), start=1):
            spacer = r > 1 and all(v == "" for v in row)
            for c, (value, color) in enumerate(zip(row, colors), start=1):
                cell = ws.cell(row=r, column=c, value=value)
                _keep_text(cell)
                cell.fill = _fill(color)
                if not spacer:
                    cell.border = CELL_BORDER
                if r == 1:
                    cell.font = HEADER_FONT
                    cell.alignment = Alignment(horizontal="center")
                elif c > LABEL_COLUMNS:
                    cell.alignment = Alignment(horizontal="right")
        ws.freeze_panes = ws.cell(row=2, column=LABEL_COLUMNS + 1)
        _autosize(ws)

    def _write_summary(self, ws: Worksheet, report: SalesReport) -> None:
        ws.append(["Summary"])
        ws["A1"].font = HEADER_FONT
        for line in report.summary:
            ws.append([line.label, line.value])
            if line.label != "Total Quantity":
                ws.cell(row=ws.max_row, column=2).number_format = CURRENCY_FORMAT

        ws.append([])
        header = ["Product", "Quantity"]
        has_sales = any(r.sales is not None for r in report.breakdown)
        has_gross = any(r.gross is not None for r in report.breakdown)
        if has_sales:
            header.append("Sales")
        if has_gross:
            header.append("Gross Sales")
        ws.append(header)
        for cell in ws[ws.max_row]:
            cell.font = HEADER_FONT

        for rollup in report.breakdown:
            values = [rollup.product, rollup.quantity]
            if has_sales:
                values.append(rollup.sales)
            if has_gross:
                values.append(rollup.gross)
            ws.append(values)
            _keep_text(ws.cell(row=ws.max_row, column=1))
            for cell in ws[ws.max_row][2:]:
                cell.number_format = CURRENCY_FORMAT
        _autosize(ws)


class CsvTableWriter:
    """Write the pivot table (header plus rows) as CSV."""

    def write(self, report: SalesReport, path: Path) -> Path:
        df = pd.DataFrame(report.aggregation.table, columns=report.aggregation.header)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False, encoding="utf-8")
        logger.info("Wrote CSV: %s (%d rows)", path, len(df))
        return path


def sink_for(path: Path) -> TabularSink:
    """Pick a sink from the output file suffix (.csv, otherwise Excel)."""
    if path.suffix.lower() == ".csv":
        return CsvTableWriter()
    return ExcelReportWriter()


def write_report(report: SalesReport, path: str | Path) -> Path:
    """Write ``report`` to ``path`` using the sink matching its suffix."""
    if isinstance(path, str):
        path = Path(path)
    return sink_for(path).write(report, path)
