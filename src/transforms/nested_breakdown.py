"""Nested period/flow/category dataset extraction.

This module reads ``period -> flow -> category -> count`` datasets into
breakdown tables, selectable category lists, and zero-filled trends.
Malformed period or flow entries degrade to empty mappings.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import INBOUND_FLOW, OUTBOUND_FLOW, TOTAL_CATEGORY
from core.types import AggregatedSeries, BreakdownRow, NestedDataset
from transforms.numeric_coercion import to_count
from transforms.ordering import numeric_period_keys, order_categories


def latest_period(dataset: NestedDataset) -> str | None:
    """Return the most recent numeric period key.

    Args:
        dataset: Nested dataset keyed by period.

    Returns:
        Maximum digit-only key by integer value, or None if none exist.
    """
    periods = numeric_period_keys(dataset.keys())
    if not periods:
        return None
    return periods[-1]


def breakdown_table(dataset: NestedDataset, period: str) -> list[BreakdownRow]:
    """Build the two-sided category breakdown for one period.

    The reserved total category is excluded.

    Args:
        dataset: Nested dataset keyed by period.
        period: Period key to read.

    Returns:
        Rows sorted lexically by category, with 0 for absent sides.
    """
    period_entry = _mapping_or_empty(dataset.get(period))
    inbound = _mapping_or_empty(period_entry.get(INBOUND_FLOW))
    outbound = _mapping_or_empty(period_entry.get(OUTBOUND_FLOW))
    categories = order_categories(
        str(name) for name in (*inbound.keys(), *outbound.keys()) if name != TOTAL_CATEGORY
    )
    return [
        BreakdownRow(
            category=category,
            inbound=to_count(inbound.get(category)),
            outbound=to_count(outbound.get(category)),
        )
        for category in categories
    ]


def latest_breakdown(dataset: NestedDataset) -> tuple[str | None, list[BreakdownRow]]:
    """Return the latest period together with its breakdown rows."""
    period = latest_period(dataset)
    if period is None:
        return None, []
    return period, breakdown_table(dataset, period)


def category_options(dataset: NestedDataset, flow: str) -> list[str]:
    """Collect every category seen under a flow across all periods.

    The reserved total category is kept so it stays selectable.

    Args:
        dataset: Nested dataset keyed by period.
        flow: Flow direction to read.

    Returns:
        Deduplicated categories in lexical order.
    """
    names: set[str] = set()
    for period_entry in dataset.values():
        flow_entry = _mapping_or_empty(_mapping_or_empty(period_entry).get(flow))
        names.update(str(name) for name in flow_entry.keys())
    return order_categories(names)


def trend_series(dataset: NestedDataset, flow: str, category: str) -> AggregatedSeries:
    """Build a full-coverage trend for one flow and category.

    Every numeric period appears; missing levels read as 0.

    Args:
        dataset: Nested dataset keyed by period.
        flow: Flow direction to read.
        category: Category to read.

    Returns:
        Series over all numeric periods in ascending order.
    """
    labels = numeric_period_keys(dataset.keys())
    values = []
    for period in labels:
        period_entry = _mapping_or_empty(dataset.get(period))
        flow_entry = _mapping_or_empty(period_entry.get(flow))
        values.append(to_count(flow_entry.get(category)))
    return AggregatedSeries(labels=tuple(labels), values=tuple(values))


def _mapping_or_empty(value: object) -> Mapping[str, object]:
    """Treat non-object entries as empty."""
    if isinstance(value, Mapping):
        return value
    return {}
