"""Public SDK surface for Statfeed.

This module provides a stable import path for library users.
It re-exports the aggregation core, readers, and session context.
"""

from __future__ import annotations

from core.config import StatfeedConfig
from core.errors import (
    EmptyDatasetWarning,
    FetchFailedError,
    MalformedRecordError,
    StatfeedError,
)
from core.types import (
    AggregatedSeries,
    BreakdownRow,
    DimensionTotal,
    MetricSeries,
    SummaryDocument,
)
from export.csv_serializer import to_csv
from ingest.dataset_cache import DatasetCache
from ingest.http_fetcher import HttpTextFetcher
from ingest.record_reader import read_document, read_line_delimited
from reports.dashboard_session import DashboardSession
from transforms.flat_aggregation import (
    group_by_dimension_then_period,
    sum_by_dimension_at_period,
    sum_by_period,
)
from transforms.nested_breakdown import (
    breakdown_table,
    category_options,
    latest_period,
    trend_series,
)
from transforms.numeric_coercion import to_count
from transforms.period_keys import normalize_period_key

__all__ = [
    "AggregatedSeries",
    "BreakdownRow",
    "DashboardSession",
    "DatasetCache",
    "DimensionTotal",
    "EmptyDatasetWarning",
    "FetchFailedError",
    "HttpTextFetcher",
    "MalformedRecordError",
    "MetricSeries",
    "StatfeedConfig",
    "StatfeedError",
    "SummaryDocument",
    "breakdown_table",
    "category_options",
    "group_by_dimension_then_period",
    "latest_period",
    "normalize_period_key",
    "read_document",
    "read_line_delimited",
    "sum_by_dimension_at_period",
    "sum_by_period",
    "to_count",
    "to_csv",
    "trend_series",
]
