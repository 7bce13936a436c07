"""Immigration dashboard report.

This module builds the per-port view (latest breakdown, selectable
categories, trend) and the rows of its two CSV exports.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import BREAKDOWN_CSV_HEADER, TREND_CSV_PERIOD_LABEL
from core.types import AggregatedSeries, BreakdownRow, CsvCell, NestedDataset
from transforms.nested_breakdown import (
    category_options,
    latest_breakdown,
    trend_series,
)


@dataclass(frozen=True)
class ImmigrationView:
    """Chart- and table-ready view of one port dataset.

    Attributes:
        port_id: Port identifier.
        flow: Selected flow direction.
        latest_period: Most recent period, None when the dataset is empty.
        breakdown: Latest-period rows without the reserved total.
        category_options: Selectable categories including the total.
        selected_category: Category driving the trend, empty when none.
        trend: Full-coverage trend for the selected category.
    """

    port_id: str
    flow: str
    latest_period: str | None
    breakdown: tuple[BreakdownRow, ...]
    category_options: tuple[str, ...]
    selected_category: str
    trend: AggregatedSeries


def build_immigration_view(
    port_id: str,
    dataset: NestedDataset,
    flow: str,
    preferred_category: str | None = None,
) -> ImmigrationView:
    """Build the view for one port.

    Args:
        port_id: Port identifier.
        dataset: Nested port dataset.
        flow: Flow direction for options and trend.
        preferred_category: Current selection to keep when still valid.

    Returns:
        Immutable view model.
    """
    period, rows = latest_breakdown(dataset)
    options = category_options(dataset, flow)
    selected = select_category(options, preferred_category)
    trend = trend_series(dataset, flow, selected) if selected else AggregatedSeries()
    return ImmigrationView(
        port_id=port_id,
        flow=flow,
        latest_period=period,
        breakdown=tuple(rows),
        category_options=tuple(options),
        selected_category=selected,
        trend=trend,
    )


def select_category(options: list[str], preferred: str | None) -> str:
    """Keep the preferred category if offered, else fall back to the first."""
    if not options:
        return ""
    if preferred in options:
        return preferred
    return options[0]


def breakdown_csv_rows(view: ImmigrationView) -> list[list[CsvCell]]:
    """Build latest-breakdown export rows, header first.

    Returns:
        Empty list when the dataset has no period.
    """
    if view.latest_period is None:
        return []
    rows: list[list[CsvCell]] = [list(BREAKDOWN_CSV_HEADER)]
    for row in view.breakdown:
        rows.append([view.latest_period, row.category, row.inbound, row.outbound])
    return rows


def trend_csv_rows(view: ImmigrationView) -> list[list[CsvCell]]:
    """Build trend export rows for the selected category, header first."""
    if not view.selected_category:
        return []
    rows: list[list[CsvCell]] = [
        [TREND_CSV_PERIOD_LABEL, f"{view.flow}_{view.selected_category}"]
    ]
    for label, value in zip(view.trend.labels, view.trend.values):
        rows.append([label, value])
    return rows


def breakdown_file_name(view: ImmigrationView) -> str:
    return f"latest_breakdown_{view.port_id}_{view.latest_period}.csv"


def trend_file_name(view: ImmigrationView) -> str:
    return f"trend_{view.port_id}_{view.flow}_{view.selected_category}.csv"
