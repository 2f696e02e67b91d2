"""Read raw sales exports into row lists."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

import pandas as pd

from pos_heatmap.exceptions import SourceError

logger = logging.getLogger(__name__)

CSV_SUFFIXES = {".csv", ".txt"}
EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def read_rows(path: str | Path, sheet_name: str | int | None = None) -> list[list[Any]]:
    """Read a CSV or Excel export as a list of rows, header first.

    CSV cells are read as text so the aggregator sees the export verbatim.
    Excel cells keep their native types (dates stay timestamps). Empty
    cells become empty strings in both cases.

    Args:
        path: Path to a .csv or .xlsx/.xlsm file.
        sheet_name: Worksheet to read from Excel files. Defaults to the first.

    Returns:
        List of rows, the first being the header row.

    Raises:
        SourceError: If the file does not exist, has an unsupported suffix,
            or cannot be read (empty, not UTF-8, malformed or corrupt).
    """
    if isinstance(path, str):
        path = Path(path)
    if not path.exists():
        raise SourceError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in CSV_SUFFIXES | EXCEL_SUFFIXES:
        raise SourceError(
            f"Unsupported input type '{path.suffix}'. "
            f"Expected one of: {', '.join(sorted(CSV_SUFFIXES | EXCEL_SUFFIXES))}."
        )

    try:
        if suffix in CSV_SUFFIXES:
            df = pd.read_csv(
                path, header=None, dtype=str, keep_default_na=False, encoding="utf-8"
            )
        else:
            df = pd.read_excel(path, sheet_name=sheet_name or 0, header=None, dtype=object)
            df = df.astype(object).where(pd.notna(df), "")
    except (
        pd.errors.EmptyDataError,
        pd.errors.ParserError,
        UnicodeDecodeError,
        ValueError,
        BadZipFile,
    ) as e:
        raise SourceError(f"Could not read {path}: {e}") from e

    rows = df.values.tolist()
    logger.info("Read %d row(s) from %s", len(rows), path)
    return rows
