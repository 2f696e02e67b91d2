"""Tests for the per-row heatmap colours."""

import pytest

from pos_heatmap.heatmap import (
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


class TestColorFor:
    """Boundary and interpolation behaviour of color_for()."""

    @pytest.mark.parametrize("row_max, row_min", [(0, 0), (10, -10), (None, None)])
    def test_zero_is_white(self, row_max: float, row_min: float) -> None:
        assert color_for(0, row_max, row_min) == WHITE

    def test_positive_without_row_max_is_white(self) -> None:
        assert color_for(5, 0, -3) == WHITE
        assert color_for(5, None, None) == WHITE
        assert color_for(5, float("nan"), 0) == WHITE

    def test_negative_without_row_min_uses_fallback(self) -> None:
        assert color_for(-5, 10, 0) == NEGATIVE_FALLBACK
        assert color_for(-5, 10, None) == NEGATIVE_FALLBACK

    def test_row_extreme_gets_anchor_colour(self) -> None:
        assert color_for(10, 10, 0) == POSITIVE_ANCHOR
        assert color_for(-5, 0, -5) == NEGATIVE_ANCHOR
        assert color_for(-5, 0, -5) != WHITE

    def test_square_root_contrast(self) -> None:
        """A quarter of the extreme blends half way (sqrt(0.25) == 0.5)."""
        assert color_for(5, 20, 0) == Color(177, 202, 227)
        assert color_for(-1, 0, -4) == Color(255, 197, 177)

    def test_exponent_is_tunable(self) -> None:
        """With exponent 1 the blend is linear in the ratio."""
        assert color_for(10, 20, 0, exponent=1.0) == Color(177, 202, 227)
        assert color_for(10, 20, 0) != color_for(10, 20, 0, exponent=1.0)

    def test_negative_red_channel_is_pinned(self) -> None:
        for value in (-1, -2, -3, -4):
            assert color_for(value, 0, -4).red == 255

    def test_larger_magnitudes_are_darker(self) -> None:
        shades = [sum(color_for(v, 100, 0)) for v in (1, 10, 50, 100)]
        assert shades == sorted(shades, reverse=True)

    def test_hex(self) -> None:
        assert WHITE.hex == "#FFFFFF"
        assert POSITIVE_ANCHOR.hex == "#6496C8"
        assert NEGATIVE_ANCHOR.hex == "#FF8C64"


def test_row_extremes() -> None:
    assert row_extremes([3, -2, 0, 7, -9]) == (7.0, -9.0)
    assert row_extremes([1, 2]) == (2.0, 0.0)
    assert row_extremes([-1, -2]) == (0.0, -2.0)
    assert row_extremes(["", None, float("nan"), 0]) == (0.0, 0.0)


def test_color_row_scales_each_row_independently() -> None:
    """The maximum of each row gets the full anchor, whatever its magnitude."""
    small = color_row([1, 2])
    large = color_row([100, 200])
    assert small[1] == POSITIVE_ANCHOR
    assert large[1] == POSITIVE_ANCHOR
    assert small[0] == large[0]


def test_color_row_mixed_signs() -> None:
    colors = color_row([4, 0, -2, ""])
    assert colors == [POSITIVE_ANCHOR, WHITE, NEGATIVE_ANCHOR, WHITE]


def test_color_table_whites_labels_and_spacers() -> None:
    table = [
        ["A", "Widget", 1, 4],
        ["", "Gadget", -3, 0],
        ["", "", "", ""],
    ]
    grid = color_table(table)

    assert [len(row) for row in grid] == [4, 4, 4]
    assert all(grid[r][c] == WHITE for r in range(3) for c in range(2))
    assert grid[0][3] == POSITIVE_ANCHOR
    assert grid[0][2] != WHITE
    assert grid[1][2] == NEGATIVE_ANCHOR
    assert grid[2] == [WHITE] * 4


def test_iter_cell_colors_is_lazy() -> None:
    cells = iter_cell_colors([["A", "Widget", 2]])
    assert next(cells) == (0, 0, WHITE)
    assert list(cells) == [(0, 1, WHITE), (0, 2, POSITIVE_ANCHOR)]
