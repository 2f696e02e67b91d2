"""Header resolution for raw sales exports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from pos_heatmap.cleaning import clean_text
from pos_heatmap.config import ColumnHeaders
from pos_heatmap.exceptions import MissingColumnsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnMap:
    """Zero-based column indices of the fields the aggregator reads.

    Optional fields are None when their header is absent from the export.
    """

    location: int
    day: int
    quantity: int
    variant: Optional[int] = None
    product: Optional[int] = None
    net_sales: Optional[int] = None
    gross_sales: Optional[int] = None

    @property
    def has_sales(self) -> bool:
        return self.net_sales is not None

    @property
    def has_gross(self) -> bool:
        return self.gross_sales is not None


def resolve_columns(
    header: Sequence[Any],
    headers: ColumnHeaders | None = None,
) -> ColumnMap:
    """Resolve header names to column indices.

    Header cells are whitespace-trimmed and compared case-sensitively. When a
    name appears more than once the first occurrence wins.

    Args:
        header: First row of the tabular source.
        headers: Header names to look for. Defaults to the POS export names.

    Returns:
        ColumnMap with the index of every header that was found.

    Raises:
        MissingColumnsError: If any of the location, day or quantity headers
            is absent.
    """
    headers = headers or ColumnHeaders()

    index: dict[str, int] = {}
    for i, cell in enumerate(header):
        index.setdefault(clean_text(cell), i)

    missing = [name for name in headers.required if name not in index]
    if missing:
        logger.error("Header row is missing required columns: %s", missing)
        raise MissingColumnsError(missing)

    optional = {
        "variant": headers.variant,
        "product": headers.product,
        "net_sales": headers.net_sales,
        "gross_sales": headers.gross_sales,
    }
    absent = [name for name in optional.values() if name not in index]
    if absent:
        logger.warning("Optional columns not found, related figures disabled: %s", absent)

    return ColumnMap(
        location=index[headers.location],
        day=index[headers.day],
        quantity=index[headers.quantity],
        **{field: index.get(name) for field, name in optional.items()},
    )
