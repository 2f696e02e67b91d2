"""Smoke tests for the pos-heatmap command line."""

from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from pos_heatmap.cli import main


@pytest.fixture
def export_csv(export_rows: list[list[Any]], tmp_path: Path) -> Path:
    path = tmp_path / "export.csv"
    pd.DataFrame(export_rows[1:], columns=export_rows[0]).to_csv(path, index=False)
    return path


def test_cli_writes_workbook(export_csv: Path, tmp_path: Path, capsys: Any) -> None:
    out = tmp_path / "heatmap.xlsx"
    assert main([str(export_csv), "-o", str(out)]) == 0
    assert out.exists()

    captured = capsys.readouterr()
    assert f"Wrote: {out}" in captured.out
    assert "Total Quantity: 11" in captured.out


def test_cli_quiet_csv(export_csv: Path, tmp_path: Path, capsys: Any) -> None:
    out = tmp_path / "pivot.csv"
    code = main([str(export_csv), "-o", str(out), "--quiet", "--location-order", "alphabetical"])
    assert code == 0
    assert "Summary:" not in capsys.readouterr().out
    assert pd.read_csv(out)["Location"].iloc[0] == "Airport"


def test_cli_missing_columns_exit_code(tmp_path: Path, capsys: Any) -> None:
    path = tmp_path / "export.csv"
    pd.DataFrame({"POS location name": ["A"], "Net items sold": [1]}).to_csv(path, index=False)

    assert main([str(path)]) == 2
    assert "Missing required columns: Day" in capsys.readouterr().err


def test_cli_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.csv")]) == 2


def test_cli_bad_timezone(export_csv: Path) -> None:
    assert main([str(export_csv), "--timezone", "Nowhere/Special"]) == 2


def test_cli_empty_file_exit_code(tmp_path: Path, capsys: Any) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("")

    assert main([str(path)]) == 2
    assert "Could not read" in capsys.readouterr().err


def test_cli_non_utf8_file_exit_code(tmp_path: Path, capsys: Any) -> None:
    path = tmp_path / "export.csv"
    path.write_bytes("POS location name,Day,Net items sold\nCafé,2024-01-15,1\n".encode("cp1252"))

    assert main([str(path)]) == 2
    assert "Could not read" in capsys.readouterr().err
