"""Unit tests for local CSV file export."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from core.errors import StatfeedExportError
from export.csv_files import date_stamp, safe_file_name, write_csv_file
from export.csv_serializer import to_csv


def test_write_csv_file_writes_utf8_with_bom(tmp_path: Path) -> None:
    """BOM-prefixed text should be written as UTF-8 bytes EF BB BF."""
    path = write_csv_file(tmp_path / "out", "ga.csv", to_csv([["JP", 1]], bom=True))

    assert path.read_bytes() == b"\xef\xbb\xbfJP,1"


def test_write_csv_file_keeps_newlines_exact(tmp_path: Path) -> None:
    """Line breaks should be written without platform translation."""
    path = write_csv_file(tmp_path, "rows.csv", "a\nb")

    assert path.read_bytes() == b"a\nb"


def test_safe_file_name_replaces_path_separators() -> None:
    """Separators in ids should not escape the output directory."""
    assert safe_file_name("trend_../x/y.csv") == "trend_.._x_y.csv"


def test_safe_file_name_rejects_empty_names() -> None:
    """Blank file names should be rejected."""
    with pytest.raises(StatfeedExportError):
        safe_file_name("  ")


def test_write_csv_file_raises_export_error_when_target_is_a_file(tmp_path: Path) -> None:
    """An output path that is a regular file should fail with an export error."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(StatfeedExportError):
        write_csv_file(blocker, "rows.csv", "a")


def test_date_stamp_formats_compact_date() -> None:
    """Date stamps should be YYYYMMDD."""
    assert date_stamp(date(2024, 3, 9)) == "20240309"
