"""Pivot aggregation of flat sales rows.

- **resolve_columns**: maps the export's header row to column indices and
  fails fast when a required header is missing.
- **aggregate**: folds data rows into location x product x date-label
  quantities, per-product rollups and grand totals, and lays them out as an
  ordered rectangular table.

Example:
    >>> from pos_heatmap.pivot import aggregate, resolve_columns
    >>> header, *rows = source_rows
    >>> result = aggregate(rows, resolve_columns(header))
    >>> result.date_labels
    ['1/15', '1/16']
"""

from pos_heatmap.pivot.aggregate import (
    AggregationResult,
    ProductRollup,
    Totals,
    aggregate,
    normalize_row_width,
)
from pos_heatmap.pivot.columns import ColumnMap, resolve_columns

__all__ = [
    "AggregationResult",
    "ColumnMap",
    "ProductRollup",
    "Totals",
    "aggregate",
    "normalize_row_width",
    "resolve_columns",
]
