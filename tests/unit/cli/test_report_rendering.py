"""Unit tests for CLI report rendering."""

from __future__ import annotations

from cli.report_rendering import render_analytics_series, render_mobility_report
from core.types import AggregatedSeries, MetricSeries
from reports.mobility_report import MobilityReport


def test_render_mobility_report_handles_empty_report() -> None:
    """An empty report should render a single notice line."""
    report = MobilityReport(
        monthly_totals=AggregatedSeries(),
        latest_month=None,
        country_totals=(),
        summary=None,
    )

    assert render_mobility_report(report, 5) == "no mobility data"


def test_render_analytics_series_formats_integral_floats() -> None:
    """Integral float metrics should print without a decimal suffix."""
    series = MetricSeries(
        labels=("2024-01",),
        metrics={"sessions": (3.0,), "activeUsers": (2.5,)},
    )

    assert render_analytics_series("US", series) == "country=US\n2024-01\t3\t2.5"
