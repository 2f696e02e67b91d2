"""Example: Build a sales heatmap workbook from a POS export

This example reads a sales export (CSV or Excel), builds the
location x product x day pivot with per-row heatmap colours, prints the
console report and writes a styled workbook.

Prerequisites:
- A sales export with at least the "POS location name", "Day" and
  "Net items sold" columns
- Modify the paths below as needed
"""

from pathlib import Path

from pos_heatmap import ReportConfig, build_report
from pos_heatmap.adapters import read_rows, write_report
from pos_heatmap.report import format_report_for_console

export_path = Path("data/sales_export.csv")  # MODIFY AS NEEDED
output_path = Path("data/sales_heatmap.xlsx")

config = ReportConfig(
    timezone="America/Chicago",  # timezone used for the M/D day labels
    location_order="first_seen",  # or "alphabetical"
)

rows = read_rows(export_path)
report = build_report(rows, config)

print(format_report_for_console(report))

print(f"\nDate columns: {report.aggregation.date_labels}")
print(f"Skipped rows: {report.aggregation.skipped_rows}")

# Per-cell colours are available without writing a workbook
for row, colors in zip(report.rows[1:4], report.colors[1:4]):
    print(row[:2], [c.hex for c in colors[2:]])

write_report(report, output_path)
print(f"\nWrote: {output_path}")
