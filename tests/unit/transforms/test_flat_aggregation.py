"""Unit tests for flat row aggregation."""

from __future__ import annotations

from core.types import AggregatedSeries, DimensionTotal
from ingest.record_reader import read_document, read_line_delimited
from tests.fixture_paths import fixture_path
from transforms.flat_aggregation import (
    group_by_dimension_then_period,
    sum_by_dimension_at_period,
    sum_by_period,
)
from transforms.nested_breakdown import trend_series


def _mobility_rows() -> list:
    text = fixture_path("feeds/mobility_rows.ndjson").read_text(encoding="utf-8")
    return read_line_delimited(text)


def _analytics_rows() -> list:
    text = fixture_path("feeds/analytics_rows.json").read_text(encoding="utf-8")
    return read_document(text)


def test_sum_by_period_totals_each_month() -> None:
    """Monthly totals should sum coerced metrics in month order."""
    series = sum_by_period(_mobility_rows(), "month", "allday")

    assert series == AggregatedSeries(labels=("2024-01", "2024-02"), values=(10, 52))


def test_sum_by_period_normalizes_compact_months() -> None:
    """Compact and hyphenated months should land in the same bucket."""
    rows = [{"ym": "202401", "n": 1}, {"ym": "2024-01", "n": 2}, {"ym": "202312", "n": 4}]

    series = sum_by_period(rows, "ym", "n")

    assert (series.labels, series.values) == (("2023-12", "2024-01"), (4, 3))


def test_sum_by_period_skips_rows_without_period() -> None:
    """Rows lacking a period should not create a bucket."""
    rows = [{"month": "2024-01", "allday": 3}, {"allday": 9}, {"month": "", "allday": 1}, "junk"]

    assert sum_by_period(rows, "month", "allday").labels == ("2024-01",)


def test_sum_by_dimension_at_period_ranks_descending() -> None:
    """Country totals should be ordered by descending value."""
    rows = [
        {"month": "2024-02", "country": "JP", "allday": 10},
        {"month": "2024-02", "country": "US", "allday": 30},
        {"month": "2024-02", "country": "JP", "allday": 5},
    ]

    totals = sum_by_dimension_at_period(rows, "country", "allday", "2024-02")

    assert totals == [DimensionTotal("US", 30), DimensionTotal("JP", 15)]


def test_sum_by_dimension_at_period_keeps_first_seen_order_for_ties() -> None:
    """Tied totals should keep the order their groups first appeared."""
    rows = [
        {"month": "m", "country": "B", "allday": 2},
        {"month": "m", "country": "A", "allday": 2},
        {"month": "m", "country": "C", "allday": 5},
    ]

    totals = sum_by_dimension_at_period(rows, "country", "allday", "m")

    assert [entry.dimension for entry in totals] == ["C", "B", "A"]


def test_sum_by_dimension_at_period_labels_missing_dimension() -> None:
    """Empty or absent countries should be grouped under the missing label."""
    totals = sum_by_dimension_at_period(_mobility_rows(), "country", "allday", "2024-02")

    assert totals == [
        DimensionTotal("US", 30),
        DimensionTotal("JP", 15),
        DimensionTotal("不明", 7),
    ]


def test_sum_by_dimension_at_period_total_matches_period_sum() -> None:
    """Ranked totals should add up to the period's metric sum."""
    rows = _mobility_rows()
    totals = sum_by_dimension_at_period(rows, "country", "allday", "2024-02")
    monthly = sum_by_period(rows, "month", "allday")

    assert sum(entry.total for entry in totals) == monthly.values[monthly.labels.index("2024-02")]


def test_sum_by_dimension_at_period_matches_compact_period() -> None:
    """The requested period should be compared after normalization."""
    rows = [{"yearMonth": "202401", "countryId": "JP", "sessions": 4}]

    totals = sum_by_dimension_at_period(
        rows, "countryId", "sessions", "202401", "UNKN", period_field="yearMonth"
    )

    assert totals == [DimensionTotal("JP", 4)]


def test_group_by_dimension_then_period_sums_devices_away() -> None:
    """Device rows for the same country and month should be summed."""
    grouped = group_by_dimension_then_period(
        _analytics_rows(), "countryId", "yearMonth", ("sessions", "activeUsers"), "UNKN"
    )

    japan = grouped["JP"]
    assert japan.labels == ("2024-01", "2024-02")
    assert japan.metrics == {"sessions": (5, 13), "activeUsers": (4, 10)}


def test_group_by_dimension_then_period_is_sparse() -> None:
    """Dimensions should only list periods they have rows for."""
    grouped = group_by_dimension_then_period(
        _analytics_rows(), "countryId", "yearMonth", ("sessions", "activeUsers"), "UNKN"
    )

    assert (grouped["US"].labels, grouped["UNKN"].labels) == (("2024-02",), ("2024-01",))


def test_sparse_grouping_contrasts_with_zero_filled_trend() -> None:
    """Grouping never fabricates periods while nested trends zero-fill them."""
    rows = [
        {"month": "2020", "country": "A", "allday": 1},
        {"month": "2021", "country": "B", "allday": 2},
    ]
    nested = {"2020": {"入国": {"A": 1}}, "2021": {"入国": {"B": 2}}}

    grouped = group_by_dimension_then_period(rows, "country", "month", ("allday",))
    trend = trend_series(nested, "入国", "A")

    assert grouped["A"].labels == ("2020",)
    assert trend.labels == ("2020", "2021") and trend.values == (1, 0)


def test_aggregations_return_empty_results_for_no_rows() -> None:
    """Empty input should produce empty outputs without raising."""
    assert (
        sum_by_period([], "month", "allday"),
        sum_by_dimension_at_period([], "country", "allday", "2024-01"),
        group_by_dimension_then_period([], "country", "month", ("allday",)),
    ) == (AggregatedSeries(), [], {})
