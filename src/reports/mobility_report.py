"""Mobility dashboard report.

This module summarizes line-delimited mobility rows into monthly totals
and a latest-month country ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence
import warnings

from core.constants import (
    MOBILITY_DIMENSION_FIELD,
    MOBILITY_METRIC_FIELD,
    MOBILITY_PERIOD_FIELD,
    UNKNOWN_DIMENSION_LABEL,
)
from core.errors import EmptyDatasetWarning
from core.logging_config import get_logger
from core.types import AggregatedSeries, DimensionTotal, FlatRow, SummaryDocument
from transforms.flat_aggregation import sum_by_dimension_at_period, sum_by_period

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class MobilityReport:
    """Monthly totals and latest-month breakdown.

    Attributes:
        monthly_totals: Metric summed over all countries per month.
        latest_month: Most recent month, None when there are no rows.
        country_totals: Latest-month totals by country, descending.
        summary: Optional narrative summary.
    """

    monthly_totals: AggregatedSeries
    latest_month: str | None
    country_totals: tuple[DimensionTotal, ...]
    summary: SummaryDocument | None = None

    @property
    def is_empty(self) -> bool:
        return not self.monthly_totals.labels

    def top_countries(self, limit: int) -> tuple[DimensionTotal, ...]:
        """Return the first ``limit`` countries of the ranking."""
        return self.country_totals[: max(limit, 0)]


def build_mobility_report(
    rows: Sequence[FlatRow],
    summary: SummaryDocument | None = None,
) -> MobilityReport:
    """Aggregate mobility rows into a report.

    Args:
        rows: Parsed mobility rows.
        summary: Optional summary document.

    Returns:
        Report; empty when there are no rows.
    """
    if not rows:
        warnings.warn("Mobility feed returned no rows.", EmptyDatasetWarning, stacklevel=2)
        _LOGGER.warning("empty_dataset", source="mobility")
        return MobilityReport(
            monthly_totals=AggregatedSeries(),
            latest_month=None,
            country_totals=(),
            summary=summary,
        )
    monthly_totals = sum_by_period(rows, MOBILITY_PERIOD_FIELD, MOBILITY_METRIC_FIELD)
    latest_month = monthly_totals.latest_label
    country_totals: list[DimensionTotal] = []
    if latest_month is not None:
        country_totals = sum_by_dimension_at_period(
            rows,
            MOBILITY_DIMENSION_FIELD,
            MOBILITY_METRIC_FIELD,
            latest_month,
            UNKNOWN_DIMENSION_LABEL,
            period_field=MOBILITY_PERIOD_FIELD,
        )
    return MobilityReport(
        monthly_totals=monthly_totals,
        latest_month=latest_month,
        country_totals=tuple(country_totals),
        summary=summary,
    )
