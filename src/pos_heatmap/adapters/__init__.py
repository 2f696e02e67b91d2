"""Tabular source and sink adapters.

The report core works on plain row lists. These adapters read those rows
from CSV or Excel exports and write finished reports back out.
"""

from pos_heatmap.adapters.sinks import (
    CsvTableWriter,
    ExcelReportWriter,
    TabularSink,
    sink_for,
    write_report,
)
from pos_heatmap.adapters.sources import read_rows

__all__ = [
    "CsvTableWriter",
    "ExcelReportWriter",
    "TabularSink",
    "read_rows",
    "sink_for",
    "write_report",
]
