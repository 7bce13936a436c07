"""Dashboard session context.

This module owns the dataset caches and the current selection for one
session. Selection changes go through a request guard so a slow load
never overwrites the result of a newer selection.
"""

from __future__ import annotations

import asyncio
from functools import partial
from pathlib import Path
from typing import Any

from core.config import StatfeedConfig
from core.constants import DEFAULT_PORT_ID, FLOW_DIRECTIONS, INBOUND_FLOW
from core.errors import StatfeedConfigError, StatfeedIngestError
from core.logging_config import get_logger
from export.csv_files import write_csv_file
from export.csv_serializer import to_csv
from ingest.dataset_cache import DatasetCache
from ingest.http_fetcher import TextFetcher
from ingest.source_loaders import (
    load_analytics_rows,
    load_mobility_rows,
    load_port_dataset,
    load_summary_document,
)
from reports.analytics_report import (
    AnalyticsReport,
    build_analytics_report,
    country_csv_rows,
    country_file_name,
)
from reports.immigration_report import (
    ImmigrationView,
    breakdown_csv_rows,
    breakdown_file_name,
    build_immigration_view,
    trend_csv_rows,
    trend_file_name,
)
from reports.mobility_report import MobilityReport, build_mobility_report
from reports.request_guard import RequestGuard

_LOGGER = get_logger(__name__)
_MOBILITY_DATASET_ID = "mobility"
_ANALYTICS_DATASET_ID = "analytics"


class DashboardSession:
    """Session-scoped caches and selection state."""

    def __init__(self, config: StatfeedConfig, fetcher: TextFetcher) -> None:
        """Create session.

        Args:
            config: Runtime configuration.
            fetcher: Text fetcher shared by all loads.
        """
        self._config = config
        self._fetcher = fetcher
        self._port_cache: DatasetCache[dict[str, Any]] = DatasetCache(
            partial(load_port_dataset, fetcher, config), name="port"
        )
        self._row_cache: DatasetCache[list[Any]] = DatasetCache(self._load_rows, name="rows")
        self._guard = RequestGuard()
        self._port_id = DEFAULT_PORT_ID
        self._flow = INBOUND_FLOW
        self._category: str | None = None

    @property
    def port_id(self) -> str:
        return self._port_id

    @property
    def flow(self) -> str:
        return self._flow

    @property
    def category(self) -> str | None:
        return self._category

    def update_selection(
        self,
        port_id: str | None = None,
        flow: str | None = None,
        category: str | None = None,
    ) -> None:
        """Change the current selection without loading anything.

        Raises:
            StatfeedConfigError: If the flow is not a known direction.
        """
        if flow is not None and flow not in FLOW_DIRECTIONS:
            raise StatfeedConfigError(
                f"Unknown flow direction '{flow}'. Use one of: {', '.join(FLOW_DIRECTIONS)}."
            )
        if port_id is not None:
            self._port_id = port_id
        if flow is not None:
            self._flow = flow
        if category is not None:
            self._category = category

    async def select_port(self, port_id: str) -> ImmigrationView | None:
        """Switch the port and load its view.

        Returns:
            The view, or None when a newer selection superseded this one.
        """
        self.update_selection(port_id=port_id)
        return await self.immigration_view()

    async def select_flow(self, flow: str) -> ImmigrationView | None:
        """Switch the flow direction and reload the view."""
        self.update_selection(flow=flow)
        return await self.immigration_view()

    async def select_category(self, category: str) -> ImmigrationView | None:
        """Switch the trend category and reload the view."""
        self.update_selection(category=category)
        return await self.immigration_view()

    async def immigration_view(self) -> ImmigrationView | None:
        """Load the view for the current selection.

        Returns:
            The view, or None when the response or failure became stale.

        Raises:
            StatfeedIngestError: If the port dataset cannot be loaded and no
                newer selection superseded this load.
        """
        token = self._guard.issue()
        port_id = self._port_id
        try:
            dataset = await self._port_cache.get(port_id)
        except StatfeedIngestError:
            if self._guard.is_current(token):
                raise
            _LOGGER.info("stale_response_discarded", port_id=port_id, token=token, failed=True)
            return None
        if not self._guard.is_current(token):
            _LOGGER.info("stale_response_discarded", port_id=port_id, token=token)
            return None
        view = build_immigration_view(port_id, dataset, self._flow, self._category)
        self._category = view.selected_category or None
        return view

    async def mobility_report(self) -> MobilityReport:
        """Load mobility rows and the optional summary concurrently."""
        rows, summary = await asyncio.gather(
            self._row_cache.get(_MOBILITY_DATASET_ID),
            load_summary_document(self._fetcher, self._config),
        )
        return build_mobility_report(rows, summary)

    async def analytics_report(self) -> AnalyticsReport:
        """Load analytics rows and group them by country."""
        rows = await self._row_cache.get(_ANALYTICS_DATASET_ID)
        return build_analytics_report(rows)

    async def export_immigration(self, output_dir: str | Path) -> list[Path]:
        """Write the breakdown and trend CSVs for the current selection.

        Returns:
            Written file paths; empty when the load became stale or there
            is nothing to export.
        """
        view = await self.immigration_view()
        if view is None:
            return []
        written: list[Path] = []
        breakdown_rows = breakdown_csv_rows(view)
        if breakdown_rows:
            written.append(
                write_csv_file(output_dir, breakdown_file_name(view), to_csv(breakdown_rows))
            )
        trend_rows = trend_csv_rows(view)
        if trend_rows:
            written.append(write_csv_file(output_dir, trend_file_name(view), to_csv(trend_rows)))
        return written

    async def export_analytics_country(
        self,
        country_id: str,
        output_dir: str | Path,
    ) -> Path | None:
        """Write one country's monthly analytics CSV with a BOM.

        Returns:
            Written path, or None when the country has no data.
        """
        report = await self.analytics_report()
        rows = country_csv_rows(country_id, report.series_for(country_id))
        if not rows:
            _LOGGER.warning("analytics_country_missing", country_id=country_id)
            return None
        return write_csv_file(output_dir, country_file_name(country_id), to_csv(rows, bom=True))

    async def _load_rows(self, dataset_id: str) -> list[Any]:
        if dataset_id == _MOBILITY_DATASET_ID:
            return await load_mobility_rows(self._fetcher, self._config)
        if dataset_id == _ANALYTICS_DATASET_ID:
            return await load_analytics_rows(self._fetcher, self._config)
        raise StatfeedConfigError(f"Unknown row dataset '{dataset_id}'.")
