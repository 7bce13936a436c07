"""Flat row aggregation.

This module groups flat records tagged with a period and dimension
values, summing coerced metrics into chart- and export-ready series.
Rows without a period value are skipped by every period-keyed operation.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from core.constants import MOBILITY_PERIOD_FIELD, UNKNOWN_DIMENSION_LABEL
from core.logging_config import get_logger
from core.types import AggregatedSeries, Count, DimensionTotal, FlatRow, MetricSeries
from transforms.numeric_coercion import to_count
from transforms.ordering import order_periods
from transforms.period_keys import is_missing_period, normalize_period_key

_LOGGER = get_logger(__name__)


def sum_by_period(
    rows: Iterable[FlatRow],
    period_field: str,
    metric_field: str,
) -> AggregatedSeries:
    """Sum one metric per normalized period.

    Args:
        rows: Flat records.
        period_field: Field holding the period key.
        metric_field: Field holding the metric to sum.

    Returns:
        Series with ascending periods and their totals.
    """
    totals: dict[str, Count] = {}
    skipped = 0
    for row in rows:
        record = _as_mapping(row)
        period = _row_period(record, period_field)
        if period is None:
            skipped += 1
            continue
        totals[period] = totals.get(period, 0) + to_count(record.get(metric_field))
    _log_skipped_rows("sum_by_period", skipped)
    labels = order_periods(totals.keys())
    return AggregatedSeries(
        labels=tuple(labels),
        values=tuple(totals[label] for label in labels),
    )


def sum_by_dimension_at_period(
    rows: Iterable[FlatRow],
    dimension_field: str,
    metric_field: str,
    period: str,
    missing_label: str = UNKNOWN_DIMENSION_LABEL,
    *,
    period_field: str = MOBILITY_PERIOD_FIELD,
) -> list[DimensionTotal]:
    """Sum one metric per dimension value within a single period.

    Args:
        rows: Flat records.
        dimension_field: Field holding the dimension value.
        metric_field: Field holding the metric to sum.
        period: Period to keep; compared after normalization.
        missing_label: Label substituted for absent or empty dimensions.
        period_field: Field holding the period key.

    Returns:
        Totals sorted by descending value; ties keep first-seen order.
    """
    target_period = normalize_period_key(period)
    totals: dict[str, Count] = {}
    for row in rows:
        record = _as_mapping(row)
        if _row_period(record, period_field) != target_period:
            continue
        dimension = _dimension_label(record.get(dimension_field), missing_label)
        totals[dimension] = totals.get(dimension, 0) + to_count(record.get(metric_field))
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [DimensionTotal(dimension=name, total=total) for name, total in ranked]


def group_by_dimension_then_period(
    rows: Iterable[FlatRow],
    dimension_field: str,
    period_field: str,
    metric_fields: Sequence[str],
    missing_label: str = UNKNOWN_DIMENSION_LABEL,
) -> dict[str, MetricSeries]:
    """Group rows by dimension, then by period, summing several metrics.

    Other fields (for example device category) are summed away. Each
    dimension keeps only the periods it has rows for.

    Args:
        rows: Flat records.
        dimension_field: Field holding the dimension value.
        period_field: Field holding the period key.
        metric_fields: Metric fields to sum per (dimension, period).
        missing_label: Label substituted for absent or empty dimensions.

    Returns:
        Dimension id to its sparse per-period series, in first-seen
        dimension order.
    """
    grouped: dict[str, dict[str, dict[str, Count]]] = {}
    skipped = 0
    for row in rows:
        record = _as_mapping(row)
        period = _row_period(record, period_field)
        if period is None:
            skipped += 1
            continue
        dimension = _dimension_label(record.get(dimension_field), missing_label)
        period_totals = grouped.setdefault(dimension, {}).setdefault(
            period, {metric: 0 for metric in metric_fields}
        )
        for metric in metric_fields:
            period_totals[metric] += to_count(record.get(metric))
    _log_skipped_rows("group_by_dimension_then_period", skipped)
    return {
        dimension: _build_metric_series(period_map, metric_fields)
        for dimension, period_map in grouped.items()
    }


def _build_metric_series(
    period_map: Mapping[str, Mapping[str, Count]],
    metric_fields: Sequence[str],
) -> MetricSeries:
    labels = order_periods(period_map.keys())
    metrics = {
        metric: tuple(period_map[label][metric] for label in labels)
        for metric in metric_fields
    }
    return MetricSeries(labels=tuple(labels), metrics=metrics)


def _row_period(record: Mapping[str, object], period_field: str) -> str | None:
    raw_period = record.get(period_field)
    if is_missing_period(raw_period):
        return None
    return normalize_period_key(raw_period)


def _dimension_label(value: object, missing_label: str) -> str:
    if value is None or value == "":
        return missing_label
    return value if isinstance(value, str) else str(value)


def _as_mapping(row: object) -> Mapping[str, object]:
    if isinstance(row, Mapping):
        return row
    return {}


def _log_skipped_rows(operation: str, skipped: int) -> None:
    if skipped:
        _LOGGER.warning("rows_without_period_skipped", operation=operation, count=skipped)
