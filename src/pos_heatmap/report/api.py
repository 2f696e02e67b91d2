"""Public API for building a sales heatmap report.

This module provides the main entry point: raw tabular rows in, a fully
assembled report (pivot table, colours, summary, breakdown) out. It does
not read or write files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from pos_heatmap.config import ReportConfig
from pos_heatmap.exceptions import EmptyInputError
from pos_heatmap.heatmap import WHITE, Color, color_table
from pos_heatmap.pivot import AggregationResult, ProductRollup, aggregate, resolve_columns
from pos_heatmap.pivot.aggregate import LABEL_COLUMNS
from pos_heatmap.report.summary import SummaryLine, product_breakdown, summary_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SalesReport:
    """Result of one report run.

    Attributes:
        aggregation: Pivot table, date labels, rollups and totals.
        colors: One colour per cell of ``rows``; the header row, label
            columns and spacer rows are white.
        summary: Summary block lines.
        breakdown: Product rollups ranked by sales (or quantity).
    """

    aggregation: AggregationResult
    colors: list[list[Color]]
    summary: list[SummaryLine]
    breakdown: list[ProductRollup]

    @property
    def rows(self) -> list[list[Any]]:
        """Header row followed by the pivot data and spacer rows."""
        return self.aggregation.table_with_header()


def build_report(
    rows: Sequence[Sequence[Any]],
    config: ReportConfig | None = None,
) -> SalesReport:
    """Build the pivot heatmap report from a tabular snapshot.

    Args:
        rows: Source rows; the first row holds the header labels.
        config: Report settings. Defaults to ReportConfig().

    Returns:
        SalesReport ready to be handed to a sink.

    Raises:
        MissingColumnsError: If a required header is absent.
        EmptyInputError: If there is no header row or no data row.

    Examples:
        >>> rows = [
        ...     ["POS location name", "Day", "Net items sold"],
        ...     ["A", "2024-01-15", 10],
        ... ]
        >>> build_report(rows).summary[0].display
        '10'
    """
    config = config or ReportConfig()

    if not rows:
        raise EmptyInputError("Input has no header row")

    header, data = rows[0], rows[1:]
    columns = resolve_columns(header, config.headers)
    if not data:
        raise EmptyInputError("Input has a header row but no data rows")

    logger.info("Building report from %d data row(s)", len(data))
    result = aggregate(data, columns, config)

    colors = [[WHITE] * result.width]
    colors.extend(color_table(result.table, LABEL_COLUMNS, config.contrast_exponent))

    return SalesReport(
        aggregation=result,
        colors=colors,
        summary=summary_lines(result.totals),
        breakdown=product_breakdown(result),
    )
