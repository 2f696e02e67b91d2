"""POS Sales Heatmap - pivot POS sales exports and colour them by magnitude.

This package turns flat sales rows (one row per location/product/day sale
event) into:

- **Pivot table**: location -> product -> day -> summed quantity, laid out
  as an ordered rectangular table with chronological date columns
- **Rollups**: per-product quantity, net sales and gross sales
- **Heatmap**: one colour per cell, scaled against its own row

Module Structure:
    pos_heatmap.pivot: Header resolution and aggregation
    pos_heatmap.heatmap: Per-row colour interpolation
    pos_heatmap.report: Report assembly, summary and console output
    pos_heatmap.adapters: CSV/Excel sources and sinks
    pos_heatmap.config: ReportConfig

Quick Start:
    >>> from pos_heatmap import ReportConfig, build_report
    >>> from pos_heatmap.adapters import read_rows, write_report
    >>>
    >>> rows = read_rows("sales_export.csv")
    >>> report = build_report(rows, ReportConfig(timezone="America/Chicago"))
    >>> report.aggregation.date_labels
    ['1/15', '1/16']
    >>> write_report(report, "heatmap.xlsx")
"""

__version__ = "0.1.0"

from pos_heatmap.config import ReportConfig
from pos_heatmap.exceptions import (
    ConfigError,
    DataQualityError,
    EmptyInputError,
    MissingColumnsError,
    PosHeatmapError,
    SourceError,
)
from pos_heatmap.heatmap import color_for
from pos_heatmap.pivot import aggregate, resolve_columns
from pos_heatmap.report import SalesReport, build_report

__all__ = [
    "ConfigError",
    "DataQualityError",
    "EmptyInputError",
    "MissingColumnsError",
    "PosHeatmapError",
    "ReportConfig",
    "SalesReport",
    "SourceError",
    "__version__",
    "aggregate",
    "build_report",
    "color_for",
    "resolve_columns",
]
