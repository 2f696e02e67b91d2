"""Build a POS sales heatmap report from an export (CLI).

Usage
-----
Console summary only:
    pos-heatmap sales_export.csv

Styled workbook:
    pos-heatmap sales_export.xlsx -o heatmap.xlsx --timezone America/Chicago

Plain pivot CSV, locations sorted by name:
    pos-heatmap sales_export.csv -o pivot.csv --location-order alphabetical

Exit codes:
    0 on success
    2 on input, schema or configuration errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pos_heatmap.adapters import read_rows, write_report
from pos_heatmap.config import LOCATION_ORDERS, ReportConfig
from pos_heatmap.exceptions import PosHeatmapError
from pos_heatmap.report import build_report, format_report_for_console

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pos-heatmap",
        description=(
            "Pivot POS sales rows by location, product and day, and colour each "
            "row as a heatmap."
        ),
    )
    p.add_argument("input", help="Sales export (.csv, .xlsx or .xlsm).")
    p.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output path. .csv writes the pivot only; any other suffix writes an .xlsx workbook.",
    )
    p.add_argument(
        "--sheet",
        default=None,
        help="Worksheet to read when the input is an Excel file (default: first sheet).",
    )
    p.add_argument(
        "--timezone",
        default=None,
        help="IANA timezone for labelling timezone-aware dates (env: POS_HEATMAP_TIMEZONE).",
    )
    p.add_argument(
        "--contrast",
        type=float,
        default=None,
        help="Heatmap contrast exponent in (0, 1] (default 0.5, env: POS_HEATMAP_CONTRAST).",
    )
    p.add_argument(
        "--location-order",
        choices=LOCATION_ORDERS,
        default=None,
        help="Order of location groups (default first_seen, env: POS_HEATMAP_LOCATION_ORDER).",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the console report.",
    )
    p.add_argument(
        "--verbose",
        "--debug",
        action="store_true",
        dest="verbose",
        help="Verbose/debug logging output, including skipped rows.",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = ReportConfig.from_env(
            timezone=args.timezone,
            contrast_exponent=args.contrast,
            location_order=args.location_order,
        )
        rows = read_rows(args.input, sheet_name=args.sheet)
        report = build_report(rows, config)

        if args.output:
            out = write_report(report, Path(args.output))
            print(f"Wrote: {out}")
        if not args.quiet:
            print(format_report_for_console(report))
    except PosHeatmapError as e:
        logger.error("Report failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    finally:
        logger.info("Processing complete")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
