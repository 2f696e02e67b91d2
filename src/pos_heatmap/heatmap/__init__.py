"""Sign-aware heatmap colours for pivot rows.

Every numeric cell is coloured against its own row: positives blend from
white towards blue relative to the row's largest positive value, negatives
blend towards red-orange relative to the row's most negative value, zero
stays white.
"""

from pos_heatmap.heatmap.colors import (
    NEGATIVE_ANCHOR,
    NEGATIVE_FALLBACK,
    POSITIVE_ANCHOR,
    WHITE,
    Color,
    color_for,
    color_row,
    color_table,
    iter_cell_colors,
    row_extremes,
)

__all__ = [
    "NEGATIVE_ANCHOR",
    "NEGATIVE_FALLBACK",
    "POSITIVE_ANCHOR",
    "WHITE",
    "Color",
    "color_for",
    "color_row",
    "color_table",
    "iter_cell_colors",
    "row_extremes",
]
