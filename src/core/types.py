"""Shared typed models.

This module defines immutable data models used by the transforms,
report, export, and session layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Union

Count = Union[int, float]
FlowDirection = Literal["入国", "出国"]
CsvCell = Union[str, int, float, bool, None]
NestedDataset = Mapping[str, object]
FlatRow = Mapping[str, object]


@dataclass(frozen=True)
class AggregatedSeries:
    """Index-aligned period labels and summed values.

    Attributes:
        labels: Ascending period keys.
        values: Summed metric value per label.
    """

    labels: tuple[str, ...] = ()
    values: tuple[Count, ...] = ()

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.values):
            raise ValueError(
                f"Series labels and values must align: "
                f"{len(self.labels)} labels, {len(self.values)} values."
            )

    @property
    def latest_label(self) -> str | None:
        """Return the last (most recent) label, or None when empty."""
        return self.labels[-1] if self.labels else None

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class MetricSeries:
    """Index-aligned period labels with several summed metrics.

    Attributes:
        labels: Ascending period keys for one dimension value.
        metrics: Metric name to values aligned with ``labels``.
    """

    labels: tuple[str, ...] = ()
    metrics: Mapping[str, tuple[Count, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for metric_name, values in self.metrics.items():
            if len(values) != len(self.labels):
                raise ValueError(
                    f"Metric '{metric_name}' has {len(values)} values "
                    f"for {len(self.labels)} labels."
                )

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True)
class BreakdownRow:
    """One category row of a latest-period breakdown.

    Attributes:
        category: Category label, never the reserved total.
        inbound: Inbound count, 0 when absent.
        outbound: Outbound count, 0 when absent.
    """

    category: str
    inbound: Count
    outbound: Count


@dataclass(frozen=True)
class DimensionTotal:
    """Summed metric for one dimension value."""

    dimension: str
    total: Count


@dataclass(frozen=True)
class SummaryDocument:
    """Optional narrative summary attached to the mobility feed.

    Attributes:
        summary_text: Free text summary, may be empty.
        latest_months: Period labels the summary covers.
    """

    summary_text: str
    latest_months: tuple[str, ...]


@dataclass(frozen=True)
class PortDefinition:
    """Known immigration data entity."""

    port_id: str
    label: str
