"""Summary block and ranked product breakdown."""

from __future__ import annotations

from dataclasses import dataclass

from pos_heatmap.pivot import AggregationResult, ProductRollup, Totals


@dataclass(frozen=True)
class SummaryLine:
    """One labelled figure of the summary block."""

    label: str
    value: float
    display: str


def format_currency(value: float) -> str:
    """Format an amount with a dollar sign, thousands separators and 2 decimals.

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-3)
        '-$3.00'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_quantity(value: float) -> str:
    """Whole quantities without decimals, fractional ones with two.

    Examples:
        >>> format_quantity(1500)
        '1,500'
        >>> format_quantity(2.5)
        '2.50'
    """
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def summary_lines(totals: Totals) -> list[SummaryLine]:
    """Total quantity, plus total sales and gross sales when available."""
    lines = [SummaryLine("Total Quantity", totals.quantity, format_quantity(totals.quantity))]
    if totals.sales is not None:
        lines.append(SummaryLine("Total Sales", totals.sales, format_currency(totals.sales)))
    if totals.gross is not None:
        lines.append(
            SummaryLine("Total Gross Sales", totals.gross, format_currency(totals.gross))
        )
    return lines


def product_breakdown(result: AggregationResult) -> list[ProductRollup]:
    """All products ranked by total sales, descending.

    Quantity is used as the ranking figure when the export has no sales
    column. Equal figures are ordered by product name.
    """

    def rank(rollup: ProductRollup) -> float:
        if result.has_sales and rollup.sales is not None:
            return rollup.sales
        return rollup.quantity

    return sorted(result.product_rollups.values(), key=lambda r: (-rank(r), r.product))
