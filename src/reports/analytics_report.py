"""Analytics dashboard report.

This module sums device categories away and builds per-country monthly
sessions and active-user series, plus the per-country CSV export.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence
import warnings

from core.constants import (
    ANALYTICS_CSV_HEADER,
    ANALYTICS_DIMENSION_FIELD,
    ANALYTICS_METRIC_FIELDS,
    ANALYTICS_PERIOD_FIELD,
    DEFAULT_COUNTRY_ID,
    UNKNOWN_COUNTRY_ID,
)
from core.errors import EmptyDatasetWarning
from core.logging_config import get_logger
from core.types import CsvCell, FlatRow, MetricSeries
from export.csv_files import date_stamp
from transforms.flat_aggregation import group_by_dimension_then_period
from transforms.ordering import order_categories

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class AnalyticsReport:
    """Per-country monthly analytics.

    Attributes:
        by_country: Country id to its sparse monthly metric series.
        country_options: Country ids in lexical order.
        default_country: Initial selection, None when there are no rows.
    """

    by_country: Mapping[str, MetricSeries]
    country_options: tuple[str, ...]
    default_country: str | None

    def series_for(self, country_id: str) -> MetricSeries:
        """Return a country's series, empty when unknown."""
        return self.by_country.get(country_id, MetricSeries())


def build_analytics_report(rows: Sequence[FlatRow]) -> AnalyticsReport:
    """Group analytics rows by country and month.

    Args:
        rows: Parsed analytics rows.

    Returns:
        Report; empty when there are no rows.
    """
    if not rows:
        warnings.warn("Analytics feed returned no rows.", EmptyDatasetWarning, stacklevel=2)
        _LOGGER.warning("empty_dataset", source="analytics")
        return AnalyticsReport(by_country={}, country_options=(), default_country=None)
    by_country = group_by_dimension_then_period(
        rows,
        ANALYTICS_DIMENSION_FIELD,
        ANALYTICS_PERIOD_FIELD,
        ANALYTICS_METRIC_FIELDS,
        UNKNOWN_COUNTRY_ID,
    )
    options = order_categories(by_country.keys())
    return AnalyticsReport(
        by_country=by_country,
        country_options=tuple(options),
        default_country=default_country(options),
    )


def default_country(options: Sequence[str]) -> str | None:
    """Prefer the home country, else the first option."""
    if DEFAULT_COUNTRY_ID in options:
        return DEFAULT_COUNTRY_ID
    return options[0] if options else None


def country_csv_rows(country_id: str, series: MetricSeries) -> list[list[CsvCell]]:
    """Build one country's export rows, header first.

    Returns:
        Empty list when the country has no data.
    """
    if not series.labels:
        return []
    rows: list[list[CsvCell]] = [list(ANALYTICS_CSV_HEADER)]
    metric_values = [series.metrics[metric] for metric in ANALYTICS_METRIC_FIELDS]
    for index, label in enumerate(series.labels):
        rows.append([country_id, label, *(values[index] for values in metric_values)])
    return rows


def country_file_name(country_id: str, today: date | None = None) -> str:
    return f"ga_monthly_{country_id}_{date_stamp(today)}.csv"
