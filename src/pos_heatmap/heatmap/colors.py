"""Per-row colour interpolation for the sales heatmap."""

from __future__ import annotations

import math
from typing import Any, Iterator, NamedTuple, Optional, Sequence

from pos_heatmap.cleaning import to_float
from pos_heatmap.config import DEFAULT_CONTRAST_EXPONENT


class Color(NamedTuple):
    """An RGB colour with 0-255 channels."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        """``#RRGGBB`` form, as accepted by spreadsheet hosts and CSS."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


WHITE = Color(255, 255, 255)
POSITIVE_ANCHOR = Color(100, 150, 200)
NEGATIVE_ANCHOR = Color(255, 140, 100)
NEGATIVE_FALLBACK = Color(255, 204, 204)


def _blend(anchor: Color, ratio: float) -> Color:
    """Move from white towards ``anchor``; ratio 0 is white, 1 is the anchor."""
    return Color(*(math.floor(255 - (255 - channel) * ratio) for channel in anchor))


def _number(value: Any) -> float:
    """Numeric cell value, with blanks, text and NaN counting as 0."""
    f = to_float(value)
    return f if f is not None else 0.0


def color_for(
    value: float,
    row_max: Optional[float],
    row_min: Optional[float],
    exponent: float = DEFAULT_CONTRAST_EXPONENT,
) -> Color:
    """Colour for one cell, scaled against the extremes of its own row.

    The ratio of the value to the row extreme of the same sign is raised to
    ``exponent`` before blending, so with the default 0.5 a cell at a
    quarter of the row maximum is already half way to the anchor colour.

    Args:
        value: Cell value. NaN must be mapped to 0 by the caller.
        row_max: Largest strictly positive value in the row (0 or None if none).
        row_min: Smallest strictly negative value in the row (0 or None if none).
        exponent: Contrast exponent in (0, 1].

    Returns:
        WHITE for zero, a white-to-blue blend for positives, a
        white-to-red-orange blend for negatives. A negative value with no
        negative row minimum gets NEGATIVE_FALLBACK; a positive value with
        no positive row maximum gets WHITE.

    Examples:
        >>> color_for(0, 10, -10)
        Color(red=255, green=255, blue=255)
        >>> color_for(10, 10, 0).hex
        '#6496C8'
        >>> color_for(-5, 0, -5)
        Color(red=255, green=140, blue=100)
    """
    if value == 0:
        return WHITE

    if value < 0:
        if not row_min or math.isnan(row_min):
            return NEGATIVE_FALLBACK
        ratio = min(abs(value) / abs(row_min), 1.0)
        return _blend(NEGATIVE_ANCHOR, ratio**exponent)

    if not row_max or math.isnan(row_max):
        return WHITE
    ratio = min(value / row_max, 1.0)
    return _blend(POSITIVE_ANCHOR, ratio**exponent)


def row_extremes(values: Sequence[Any]) -> tuple[float, float]:
    """Return ``(row_max, row_min)`` for heatmap scaling.

    row_max is the largest strictly positive value and row_min the smallest
    strictly negative value; each is 0 when the row has no value of that sign.

    Examples:
        >>> row_extremes([3, -2, 0, 7, -9])
        (7.0, -9.0)
        >>> row_extremes([0, "", None])
        (0.0, 0.0)
    """
    numbers = [_number(v) for v in values]
    positives = [v for v in numbers if v > 0]
    negatives = [v for v in numbers if v < 0]
    return (max(positives, default=0.0), min(negatives, default=0.0))


def color_row(
    values: Sequence[Any],
    exponent: float = DEFAULT_CONTRAST_EXPONENT,
) -> list[Color]:
    """Colour every value of one row against that row's own extremes."""
    numbers = [_number(v) for v in values]
    row_max, row_min = row_extremes(numbers)
    return [color_for(v, row_max, row_min, exponent) for v in numbers]


def iter_cell_colors(
    table: Sequence[Sequence[Any]],
    label_columns: int = 2,
    exponent: float = DEFAULT_CONTRAST_EXPONENT,
) -> Iterator[tuple[int, int, Color]]:
    """Lazily yield ``(row_index, column_index, colour)`` for every cell.

    Label columns are always WHITE. Spacer rows (no numeric cells) come out
    WHITE as well, since blanks count as 0.
    """
    for r, row in enumerate(table):
        for c in range(min(label_columns, len(row))):
            yield r, c, WHITE
        for offset, color in enumerate(color_row(row[label_columns:], exponent)):
            yield r, label_columns + offset, color


def color_table(
    table: Sequence[Sequence[Any]],
    label_columns: int = 2,
    exponent: float = DEFAULT_CONTRAST_EXPONENT,
) -> list[list[Color]]:
    """Colour grid with the same shape as ``table``."""
    grid: list[list[Color]] = [[WHITE] * len(row) for row in table]
    for r, c, color in iter_cell_colors(table, label_columns, exponent):
        grid[r][c] = color
    return grid
