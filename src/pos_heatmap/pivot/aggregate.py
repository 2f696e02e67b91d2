"""Fold raw sales rows into the location x product x date pivot.

The fold works on a normalized frame with one row per accepted sale event:

    location | product | day | date_label | quantity | net_sales | gross_sales

Rows with a blank location or an unparseable day never reach the frame.
Everything downstream (pivot cells, product rollups, grand totals and the
ordered output table) is a groupby over that frame, so the conservation
property holds by construction: the sum of all pivot cells equals the sum
of quantities over the accepted rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence

import pandas as pd

from pos_heatmap.cleaning import (
    clean_text,
    date_label,
    local_date,
    parse_number_or_default,
    to_date,
)
from pos_heatmap.config import ReportConfig
from pos_heatmap.pivot.columns import ColumnMap

logger = logging.getLogger(__name__)

UNKNOWN_PRODUCT = "Unknown"

FRAME_COLUMNS = [
    "location",
    "product",
    "day",
    "date_label",
    "quantity",
    "net_sales",
    "gross_sales",
]

LABEL_COLUMNS = 2


@dataclass(frozen=True)
class ProductRollup:
    """Totals for one product pooled across all locations and dates.

    ``sales`` and ``gross`` are None when the export has no such column.
    """

    product: str
    quantity: float
    sales: Optional[float] = None
    gross: Optional[float] = None


@dataclass(frozen=True)
class Totals:
    """Grand totals for the summary block."""

    quantity: float
    sales: Optional[float] = None
    gross: Optional[float] = None


@dataclass(frozen=True)
class AggregationResult:
    """Output of one aggregation run.

    Attributes:
        table: Ordered data and spacer rows, each exactly ``width`` cells.
        date_labels: Column labels in chronological order.
        pivot: Read-only mapping location -> product -> date label -> quantity.
        product_rollups: Read-only mapping product -> ProductRollup, in
            first-seen order.
        totals: Grand totals.
        skipped_rows: Number of input rows dropped for a blank location or an
            unparseable date.
    """

    table: list[list[Any]]
    date_labels: list[str]
    pivot: Mapping[str, Mapping[str, Mapping[str, float]]]
    product_rollups: Mapping[str, ProductRollup]
    totals: Totals
    skipped_rows: int = 0
    has_sales: bool = False

    @property
    def width(self) -> int:
        return LABEL_COLUMNS + len(self.date_labels)

    @property
    def header(self) -> list[str]:
        return ["Location", "Product", *self.date_labels]

    def table_with_header(self) -> list[list[Any]]:
        """Header row followed by the data and spacer rows."""
        return [self.header, *self.table]


def normalize_row_width(row: Sequence[Any], width: int) -> list[Any]:
    """Pad with empty strings or truncate so that the row has ``width`` cells.

    Examples:
        >>> normalize_row_width(["A", "B"], 4)
        ['A', 'B', '', '']
        >>> normalize_row_width(["A", "B", 1, 2], 3)
        ['A', 'B', 1]
    """
    cells = list(row[:width])
    return cells + [""] * (width - len(cells))


def _cell(row: Sequence[Any], index: Optional[int]) -> Any:
    if index is None or index >= len(row):
        return None
    return row[index]


def _resolve_product(row: Sequence[Any], columns: ColumnMap) -> str:
    """Variant title, then product title, then the Unknown sentinel."""
    return (
        clean_text(_cell(row, columns.variant))
        or clean_text(_cell(row, columns.product))
        or UNKNOWN_PRODUCT
    )


def _as_number(value: Any) -> float | int:
    """Plain Python number, integral floats as int for readable output."""
    v = float(value)
    return int(v) if v.is_integer() else v


def _normalize_rows(
    raw_rows: Iterable[Sequence[Any]],
    columns: ColumnMap,
    config: ReportConfig,
) -> tuple[pd.DataFrame, int]:
    """Build the normalized frame and count the rows that were skipped."""
    zone = config.zone
    records = []
    skipped = 0

    for n, row in enumerate(raw_rows, start=1):
        location = clean_text(_cell(row, columns.location))
        if not location:
            logger.debug("Row %d skipped: blank location", n)
            skipped += 1
            continue

        ts = to_date(_cell(row, columns.day))
        if pd.isna(ts):
            logger.debug("Row %d skipped: unparseable day %r", n, _cell(row, columns.day))
            skipped += 1
            continue

        records.append(
            {
                "location": location,
                "product": _resolve_product(row, columns),
                "day": local_date(ts, zone),
                "date_label": date_label(ts, zone),
                "quantity": parse_number_or_default(_cell(row, columns.quantity)).value,
                "net_sales": parse_number_or_default(_cell(row, columns.net_sales)).value,
                "gross_sales": parse_number_or_default(_cell(row, columns.gross_sales)).value,
            }
        )

    frame = pd.DataFrame(records, columns=FRAME_COLUMNS)
    for col in ("quantity", "net_sales", "gross_sales"):
        frame[col] = frame[col].astype(float)
    return frame, skipped


def _order_date_labels(frame: pd.DataFrame) -> list[str]:
    """Distinct labels sorted by the first day seen for each label."""
    first_seen = frame.drop_duplicates("date_label", keep="first")
    return first_seen.sort_values("day", kind="stable")["date_label"].tolist()


def _build_pivot(
    frame: pd.DataFrame,
) -> dict[str, dict[str, dict[str, float]]]:
    sums = frame.groupby(["location", "product", "date_label"], sort=False)["quantity"].sum()
    pivot: dict[str, dict[str, dict[str, float]]] = {}
    for (location, product, label), qty in sums.items():
        pivot.setdefault(location, {}).setdefault(product, {})[label] = _as_number(qty)
    return pivot


def _freeze(pivot: dict[str, dict[str, dict[str, float]]]) -> Mapping:
    return MappingProxyType(
        {
            location: MappingProxyType(
                {product: MappingProxyType(dict(cells)) for product, cells in products.items()}
            )
            for location, products in pivot.items()
        }
    )


def _build_rollups(frame: pd.DataFrame, columns: ColumnMap) -> dict[str, ProductRollup]:
    sums = frame.groupby("product", sort=False)[["quantity", "net_sales", "gross_sales"]].sum()
    return {
        product: ProductRollup(
            product=product,
            quantity=_as_number(row["quantity"]),
            sales=float(row["net_sales"]) if columns.has_sales else None,
            gross=float(row["gross_sales"]) if columns.has_gross else None,
        )
        for product, row in sums.iterrows()
    }


def _build_table(
    pivot: Mapping[str, Mapping[str, Mapping[str, float]]],
    locations: list[str],
    date_labels: list[str],
) -> list[list[Any]]:
    width = LABEL_COLUMNS + len(date_labels)
    table: list[list[Any]] = []

    for location in locations:
        products = pivot[location]
        for i, product in enumerate(sorted(products)):
            cells = products[product]
            row = [location if i == 0 else "", product]
            row.extend(cells.get(label, 0) for label in date_labels)
            table.append(normalize_row_width(row, width))
        table.append(normalize_row_width([], width))

    return table


def aggregate(
    raw_rows: Iterable[Sequence[Any]],
    columns: ColumnMap,
    config: ReportConfig | None = None,
) -> AggregationResult:
    """Aggregate raw sales rows into a sorted pivot table and rollups.

    Per row: the location is trimmed (blank rows are skipped), the day is
    parsed (unparseable rows are skipped) and labelled ``M/D``, the product
    name falls back from variant title to product title to "Unknown", and
    numeric fields that do not parse count as 0.

    Output ordering:
    - Date columns ascend by the first day seen for each label.
    - Locations follow ``config.location_order`` (first seen by default).
    - Products within a location are sorted alphabetically.
    - A blank spacer row follows each location group.

    Args:
        raw_rows: Data rows, header excluded.
        columns: Column indices from resolve_columns().
        config: Report settings. Defaults to ReportConfig().

    Returns:
        AggregationResult with the table, labels, pivot, rollups and totals.

    Examples:
        >>> columns = ColumnMap(location=0, day=1, quantity=3, variant=2)
        >>> rows = [["A", "2024-01-16", "Widget", 5], ["A", "2024-01-15", "Widget", 10]]
        >>> result = aggregate(rows, columns)
        >>> result.date_labels
        ['1/15', '1/16']
        >>> result.table
        [['A', 'Widget', 10, 5], ['', '', '', '']]
    """
    config = config or ReportConfig()

    frame, skipped = _normalize_rows(raw_rows, columns, config)
    logger.info("Accepted %d row(s), skipped %d", len(frame), skipped)

    date_labels = _order_date_labels(frame)
    pivot = _build_pivot(frame)

    locations = list(pivot)
    if config.location_order == "alphabetical":
        locations = sorted(locations)

    table = _build_table(pivot, locations, date_labels)
    rollups = _build_rollups(frame, columns)

    totals = Totals(
        quantity=_as_number(frame["quantity"].sum()),
        sales=float(frame["net_sales"].sum()) if columns.has_sales else None,
        gross=float(frame["gross_sales"].sum()) if columns.has_gross else None,
    )

    logger.info(
        "Pivot built: %d location(s), %d product(s), %d date column(s)",
        len(locations),
        len(rollups),
        len(date_labels),
    )

    return AggregationResult(
        table=table,
        date_labels=date_labels,
        pivot=_freeze(pivot),
        product_rollups=MappingProxyType(rollups),
        totals=totals,
        skipped_rows=skipped,
        has_sales=columns.has_sales,
    )
