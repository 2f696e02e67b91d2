"""Shared fixtures: a small POS export covering the common edge cases."""

from typing import Any

import pytest

HEADER = [
    "POS location name",
    "Day",
    "Product variant title at time of sale",
    "Product title at time of sale",
    "Net items sold",
    "Gross Sales",
    "Total sales",
]


@pytest.fixture
def header() -> list[str]:
    return list(HEADER)


@pytest.fixture
def export_rows() -> list[list[Any]]:
    """Header plus data rows.

    - Downtown/Latte appears on both days, the later day first.
    - Downtown/Muffin has no variant title and falls back to the product title.
    - One row has a blank location and one has an unparseable day (both skipped).
    - The last Airport row has no product names and a non-numeric quantity.
    """
    return [
        list(HEADER),
        ["Downtown", "2024-01-16", "Latte", "Coffee", 3, "12.00", "10.50"],
        ["Downtown", "2024-01-15", "", "Muffin", 2, "6.00", "5.00"],
        ["Airport", "2024-01-15", "Latte", "Coffee", 5, "20.00", "17.50"],
        ["Downtown", "2024-01-15", "Latte", "Coffee", "1", "4.00", "3.50"],
        ["   ", "2024-01-15", "Latte", "Coffee", 100, "400", "350"],
        ["Airport", "not a date", "Latte", "Coffee", 7, "28", "24.5"],
        ["Airport", "2024-01-16", "", "", "abc", "", ""],
    ]
