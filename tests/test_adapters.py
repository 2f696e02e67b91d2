"""Tests for the CSV/Excel sources and the report sinks."""

from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd
import pytest
from openpyxl import Workbook, load_workbook

from pos_heatmap.adapters import (
    CsvTableWriter,
    ExcelReportWriter,
    read_rows,
    sink_for,
    write_report,
)
from pos_heatmap.exceptions import SourceError
from pos_heatmap.report import build_report


def _write_csv(rows: list[list[Any]], path: Path) -> Path:
    pd.DataFrame(rows[1:], columns=rows[0]).to_csv(path, index=False)
    return path


class TestReadRows:
    def test_reads_csv_as_text(self, export_rows: list[list[Any]], tmp_path: Path) -> None:
        path = _write_csv(export_rows, tmp_path / "export.csv")
        rows = read_rows(path)

        assert rows[0] == export_rows[0]
        assert rows[1] == ["Downtown", "2024-01-16", "Latte", "Coffee", "3", "12.00", "10.50"]
        assert rows[2][2] == "", "Empty cells should read as empty strings"
        assert len(rows) == len(export_rows)

    def test_reads_excel_with_native_dates(self, tmp_path: Path) -> None:
        wb = Workbook()
        ws = wb.active
        ws.append(["POS location name", "Day", "Net items sold", "Total sales"])
        ws.append(["A", datetime(2024, 1, 15), 4, None])
        path = tmp_path / "export.xlsx"
        wb.save(path)

        rows = read_rows(str(path))
        assert rows[0] == ["POS location name", "Day", "Net items sold", "Total sales"]
        assert pd.Timestamp(rows[1][1]) == pd.Timestamp("2024-01-15")
        assert rows[1][3] == ""

        report = build_report(rows)
        assert report.aggregation.date_labels == ["1/15"]
        assert report.aggregation.totals.quantity == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SourceError, match="not found"):
            read_rows(tmp_path / "nope.csv")

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "export.json"
        path.write_text("{}")
        with pytest.raises(SourceError, match="Unsupported"):
            read_rows(path)

    def test_empty_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(SourceError, match="Could not read"):
            read_rows(path)

    def test_non_utf8_csv(self, tmp_path: Path) -> None:
        """A cp1252 export is reported as unreadable instead of crashing."""
        path = tmp_path / "export.csv"
        text = "POS location name,Day,Net items sold\nCafé,2024-01-15,1\n"
        path.write_bytes(text.encode("cp1252"))
        with pytest.raises(SourceError, match="Could not read"):
            read_rows(path)

    def test_corrupt_xlsx(self, tmp_path: Path) -> None:
        path = tmp_path / "export.xlsx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(SourceError, match="Could not read"):
            read_rows(path)


class TestSinks:
    def test_sink_for_suffix(self) -> None:
        assert isinstance(sink_for(Path("out.csv")), CsvTableWriter)
        assert isinstance(sink_for(Path("out.xlsx")), ExcelReportWriter)

    def test_excel_pivot_sheet(self, export_rows: list[list[Any]], tmp_path: Path) -> None:
        report = build_report(export_rows)
        path = write_report(report, tmp_path / "out" / "heatmap.xlsx")

        wb = load_workbook(path)
        assert wb.sheetnames == ["Pivot", "Summary"]
        ws = wb["Pivot"]

        assert [c.value for c in ws[1]] == ["Location", "Product", "1/15", "1/16"]
        assert [c.value for c in ws[2]] == ["Downtown", "Latte", 1, 3]
        assert ws["A2"].fill.start_color.rgb.endswith("FFFFFF")
        assert ws["D2"].fill.start_color.rgb.endswith("6496C8")
        assert ws["A1"].font.bold
        assert ws.max_row == len(report.rows)

    def test_excel_summary_sheet(self, export_rows: list[list[Any]], tmp_path: Path) -> None:
        path = write_report(build_report(export_rows), tmp_path / "heatmap.xlsx")
        ws = load_workbook(path)["Summary"]

        assert ws["A1"].value == "Summary"
        assert (ws["A2"].value, ws["B2"].value) == ("Total Quantity", 11)
        assert ws["A3"].value == "Total Sales"
        assert ws["B3"].value == pytest.approx(36.5)
        assert [c.value for c in ws[6]] == ["Product", "Quantity", "Sales", "Gross Sales"]
        assert ws["A7"].value == "Latte"

    def test_excel_stores_formula_text_as_text(self, tmp_path: Path) -> None:
        rows = [
            ["POS location name", "Day", "Product title at time of sale", "Net items sold"],
            ["A", "2024-01-15", "=1+1", 1],
        ]
        path = write_report(build_report(rows), tmp_path / "heatmap.xlsx")
        wb = load_workbook(path)

        pivot_cell = wb["Pivot"]["B2"]
        assert pivot_cell.value == "=1+1"
        assert pivot_cell.data_type == "s", "Product names must not become formulas"
        summary_cell = wb["Summary"]["A5"]
        assert (summary_cell.value, summary_cell.data_type) == ("=1+1", "s")

    def test_excel_keeps_dash_and_at_names_unchanged(self, tmp_path: Path) -> None:
        rows = [
            ["POS location name", "Day", "Product title at time of sale", "Net items sold"],
            ["A", "2024-01-15", "-Special", 1],
            ["A", "2024-01-15", "@Home", 1],
            ["A", "2024-01-15", "+Extra", 1],
        ]
        path = write_report(build_report(rows), tmp_path / "heatmap.xlsx")
        ws = load_workbook(path)["Pivot"]
        assert [ws.cell(row=r, column=2).value for r in (2, 3, 4)] == [
            "+Extra",
            "-Special",
            "@Home",
        ]

    def test_csv_table(self, export_rows: list[list[Any]], tmp_path: Path) -> None:
        report = build_report(export_rows)
        path = write_report(report, str(tmp_path / "pivot.csv"))

        df = pd.read_csv(path, keep_default_na=False, dtype=str)
        assert list(df.columns) == ["Location", "Product", "1/15", "1/16"]
        assert len(df) == len(report.aggregation.table)
        assert df.iloc[0].tolist() == ["Downtown", "Latte", "1", "3"]
