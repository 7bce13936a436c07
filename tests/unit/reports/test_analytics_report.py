"""Unit tests for the analytics report."""

from __future__ import annotations

from datetime import date

import pytest

from core.errors import EmptyDatasetWarning
from ingest.record_reader import read_document
from reports.analytics_report import (
    build_analytics_report,
    country_csv_rows,
    country_file_name,
    default_country,
)
from tests.fixture_paths import fixture_path


def _rows() -> list:
    return read_document(fixture_path("feeds/analytics_rows.json").read_text(encoding="utf-8"))


def test_build_analytics_report_lists_sorted_countries() -> None:
    """Country options should be sorted and include the unknown bucket."""
    report = build_analytics_report(_rows())

    assert report.country_options == ("JP", "UNKN", "US")
    assert report.default_country == "JP"


def test_default_country_falls_back_to_first_option() -> None:
    """Without JP the first option should be selected."""
    assert (default_country(["KR", "US"]), default_country([])) == ("KR", None)


def test_country_csv_rows_use_normalized_months() -> None:
    """Export rows should carry hyphenated months and summed metrics."""
    report = build_analytics_report(_rows())

    assert country_csv_rows("JP", report.series_for("JP")) == [
        ["countryId", "yearMonth", "sessions", "activeUsers"],
        ["JP", "2024-01", 5, 4],
        ["JP", "2024-02", 13, 10],
    ]


def test_country_csv_rows_empty_for_unknown_country() -> None:
    """Countries without data should export nothing."""
    report = build_analytics_report(_rows())

    assert country_csv_rows("FR", report.series_for("FR")) == []


def test_country_file_name_includes_date_stamp() -> None:
    """File names should carry the country and export date."""
    assert country_file_name("JP", date(2025, 1, 2)) == "ga_monthly_JP_20250102.csv"


def test_build_analytics_report_warns_on_empty_rows() -> None:
    """Zero rows should warn and produce an empty report."""
    with pytest.warns(EmptyDatasetWarning):
        report = build_analytics_report([])

    assert report.default_country is None and report.country_options == ()
