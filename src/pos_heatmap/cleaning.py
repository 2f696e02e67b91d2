"""Shared utilities for cleaning raw sales cells.

This module provides the small, forgiving parsers used by the aggregator
for normalizing text, parsing numbers and handling dates. None of them
raise on bad input: text becomes None, numbers fall back to a default,
dates become NaT.

Key utilities:
- Text normalization: strip invisible characters, trim keys
- Number parsing: currency symbols and codes, thousands separators,
  (negatives), scientific notation
- Date parsing: ISO and US formats, spreadsheet timestamps
- Date labels: short "M/D" column keys in a fixed timezone

Examples:
    >>> from pos_heatmap.cleaning import parse_number_or_default, to_date, date_label
    >>> parse_number_or_default("1,234.56").value
    1234.56
    >>> parse_number_or_default("n/a")
    ParsedNumber(value=0.0, parsed=False)
    >>> date_label(to_date("2024-01-05"))
    '1/5'
"""

from __future__ import annotations

import math
import re
import warnings
from datetime import date, datetime, timezone, tzinfo
from typing import Any, NamedTuple, Optional

import numpy as np
import pandas as pd

# Unicode characters that should be stripped from text
NBSP = "\u00a0"  # Non-breaking space
NNBSP = "\u202f"  # Narrow non-breaking space
ZW = "".join(chr(c) for c in (0x200B, 0x200C, 0x200D, 0xFEFF))  # Zero-width characters

# Leading/trailing whitespace and zero-width characters around a key
_EDGE_RE = re.compile(r"^[\s%s]+|[\s%s]+$" % (re.escape(ZW), re.escape(ZW)))

# Currency symbols and spaces are the only noise removed from numbers
_CURRENCY_RE = re.compile(r"[$€£¥\s]")
_CURRENCY_CODE_RE = re.compile(r"^[A-Z]{3}|[A-Z]{3}$")

# Explicit formats tried before pandas inference; exports use ISO or US order
DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y-%m-%d %H:%M:%S", "%m/%d/%Y %H:%M:%S")


class ParsedNumber(NamedTuple):
    """Result of a forgiving numeric parse.

    Attributes:
        value: The parsed number, or the default when parsing failed.
        parsed: True when the input held a usable finite number.
    """

    value: float
    parsed: bool


def strip_invisibles(x: Any) -> Optional[str]:
    """Remove invisible and problematic whitespace characters from text.

    Args:
        x: Value to clean (string, number, or None).

    Returns:
        Cleaned string or None if input is None/NaN.

    Examples:
        >>> strip_invisibles("  Main Street  ")
        'Main Street'
        >>> strip_invisibles(None)
    """
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return None
    s = str(x)
    s = s.replace("\r", "").replace("\t", " ").replace(NBSP, " ").replace(NNBSP, " ")
    s = re.sub(r"[%s]" % re.escape(ZW), "", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


def clean_text(x: Any) -> str:
    """Trim a key cell, or return an empty string for missing values.

    Only the ends are touched: whitespace (including non-breaking spaces)
    and zero-width characters are removed there, while internal spacing is
    kept so that "Main  St" and "Main St" stay distinct keys.

    Examples:
        >>> clean_text("\\u200b Iced  Latte ")
        'Iced  Latte'
    """
    if x is None or (isinstance(x, float) and pd.isna(x)):
        return ""
    return _EDGE_RE.sub("", str(x))


def to_float(x: Any) -> Optional[float]:
    """Robustly parse numbers as they appear in sales exports.

    Handles:
    - Native ints/floats (bools are rejected)
    - US format: '1,234.56'
    - EU format: '1.234,56'
    - Negative in parentheses: '(1,234.56)'
    - Currency symbols and codes: '$ 1,234.56', '12.50 EUR'
    - Scientific notation: '1e3'

    Any other text (for example '12abc') does not parse.

    Args:
        x: Value to parse (string, number, or None).

    Returns:
        Parsed finite float or None if parsing fails.

    Examples:
        >>> to_float("$1,234.56")
        1234.56
        >>> to_float("(12)")
        -12.0
        >>> to_float("1e3")
        1000.0
        >>> to_float("12abc") is None
        True
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, (int, float, np.integer, np.floating)):
        v = float(x)
        return None if math.isnan(v) or math.isinf(v) else v

    s = str(x).strip()
    if not s:
        return None

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg, s = True, s[1:-1].strip()

    s = _CURRENCY_CODE_RE.sub("", s.strip())
    s = _CURRENCY_RE.sub("", s)
    # float() would also accept '1_000'
    if not s or "_" in s:
        return None

    def _finalize(num_str: str) -> Optional[float]:
        try:
            v = float(num_str)
        except ValueError:
            return None
        if math.isnan(v) or math.isinf(v):
            return None
        return -v if neg else v

    # Plain and scientific notation
    try:
        float(s)
    except ValueError:
        pass
    else:
        return _finalize(s)

    # 1.234,56 (EU)
    if re.fullmatch(r"-?\d{1,3}(?:\.\d{3})+,\d{1,2}", s):
        return _finalize(s.replace(".", "").replace(",", "."))

    # 1,234.56 or 1,234 (US)
    if re.fullmatch(r"-?\d{1,3}(?:,\d{3})+(?:\.\d+)?", s):
        return _finalize(s.replace(",", ""))

    # A lone comma is a decimal separator
    if re.fullmatch(r"-?\d+,\d+", s):
        return _finalize(s.replace(",", "."))

    return None


def parse_number_or_default(x: Any, default: float = 0.0) -> ParsedNumber:
    """Parse a numeric cell, falling back to ``default`` instead of failing.

    Used uniformly for quantity, net sales and gross sales so that a bad
    cell never drops the row it belongs to.

    Args:
        x: Raw cell value.
        default: Value returned when the cell is blank or not a number.

    Returns:
        ParsedNumber with the value and whether parsing succeeded.
    """
    f = to_float(x)
    if f is None:
        return ParsedNumber(default, False)
    return ParsedNumber(f, True)


def to_date(val: Any) -> pd.Timestamp:
    """Parse a date cell into a Timestamp.

    Accepts Timestamps, datetimes, dates, numpy datetime64 values and
    strings in ISO or US order (falling back to pandas inference).
    Numbers and booleans are not treated as dates.

    Args:
        val: Value to parse.

    Returns:
        Parsed Timestamp (timezone-aware when the input carried an offset)
        or pd.NaT if parsing fails.

    Examples:
        >>> to_date("2024-01-15")
        Timestamp('2024-01-15 00:00:00')
        >>> to_date("01/15/2024")
        Timestamp('2024-01-15 00:00:00')
        >>> to_date("not a date")
        NaT
    """
    if val is None or isinstance(val, (bool, int, float, np.integer, np.floating)):
        return pd.NaT
    if isinstance(val, (pd.Timestamp, datetime, np.datetime64)):
        return pd.to_datetime(val, errors="coerce")
    if isinstance(val, date):
        return pd.Timestamp(val)

    s = strip_invisibles(val)
    if not s:
        return pd.NaT
    for fmt in DATE_FORMATS:
        try:
            return pd.to_datetime(s, format=fmt, errors="raise")
        except (ValueError, TypeError):
            pass
    with warnings.catch_warnings():
        # pandas warns when it has to guess a format per element
        warnings.simplefilter("ignore", UserWarning)
        try:
            return pd.to_datetime(s, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return pd.NaT


def local_date(ts: pd.Timestamp, zone: tzinfo | None = None) -> pd.Timestamp:
    """Return the calendar day of ``ts`` as a naive midnight Timestamp.

    Timezone-aware values are first converted to ``zone``, or to UTC when no
    zone is given; naive values are taken to be local already.

    Examples:
        >>> local_date(pd.Timestamp("2024-01-16T02:00:00+05:00"))
        Timestamp('2024-01-15 00:00:00')
    """
    if ts.tzinfo is not None:
        ts = ts.tz_convert(zone or timezone.utc)
    return pd.Timestamp(ts.year, ts.month, ts.day)


def date_label(ts: pd.Timestamp, zone: tzinfo | None = None) -> str:
    """Format a date as a short ``M/D`` column label without leading zeros.

    Examples:
        >>> date_label(pd.Timestamp("2024-03-07"))
        '3/7'
    """
    day = local_date(ts, zone)
    return f"{day.month}/{day.day}"
