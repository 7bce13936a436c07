"""Source loaders for the configured feeds.

This module binds each wire format to its endpoint: nested port datasets,
line-delimited mobility rows, analytics rows, and the optional summary.
"""

from __future__ import annotations

from typing import Any

from core.config import StatfeedConfig
from core.constants import DATASET_FILE_SUFFIX
from core.errors import MalformedRecordError, StatfeedConfigError, StatfeedIngestError
from core.logging_config import get_logger
from core.types import SummaryDocument
from ingest.http_fetcher import TextFetcher
from ingest.record_reader import parse_summary_document, read_document, read_line_delimited

_LOGGER = get_logger(__name__)


def port_dataset_url(config: StatfeedConfig, port_id: str) -> str:
    """Build the nested dataset URL for a port id."""
    return f"{config.immigration_base_url}{port_id}{DATASET_FILE_SUFFIX}"


async def load_port_dataset(
    fetcher: TextFetcher,
    config: StatfeedConfig,
    port_id: str,
) -> dict[str, Any]:
    """Fetch and parse one port's nested dataset.

    Args:
        fetcher: Text fetcher.
        config: Runtime configuration.
        port_id: Port identifier.

    Returns:
        Nested ``period -> flow -> category -> count`` mapping.

    Raises:
        FetchFailedError: If the request fails.
        MalformedRecordError: If the body is not a JSON object.
    """
    url = port_dataset_url(config, port_id)
    payload = read_document(await fetcher.fetch_text(url))
    if not isinstance(payload, dict):
        raise MalformedRecordError(
            f"Invalid port dataset at {url}: expected a JSON object keyed by period, "
            f"got {type(payload).__name__}."
        )
    _LOGGER.info("port_dataset_loaded", port_id=port_id, periods=len(payload))
    return payload


async def load_mobility_rows(fetcher: TextFetcher, config: StatfeedConfig) -> list[Any]:
    """Fetch and parse line-delimited mobility rows."""
    rows = read_line_delimited(await fetcher.fetch_text(config.mobility_url))
    _LOGGER.info("mobility_rows_loaded", rows=len(rows))
    return rows


async def load_analytics_rows(fetcher: TextFetcher, config: StatfeedConfig) -> list[Any]:
    """Fetch and parse analytics rows.

    Args:
        fetcher: Text fetcher.
        config: Runtime configuration with analytics endpoint and dates.

    Returns:
        Analytics row objects.

    Raises:
        StatfeedConfigError: If no analytics endpoint is configured.
        FetchFailedError: If the request fails.
        MalformedRecordError: If the body is not a JSON array.
    """
    if not config.analytics_url:
        raise StatfeedConfigError(
            "Analytics endpoint is not configured. Set STATFEED_ANALYTICS_URL."
        )
    params = {
        "startDate": config.analytics_start_date,
        "endDate": config.analytics_end_date,
    }
    payload = read_document(await fetcher.fetch_text(config.analytics_url, params))
    if not isinstance(payload, list):
        raise MalformedRecordError(
            f"Invalid analytics payload at {config.analytics_url}: expected a JSON array, "
            f"got {type(payload).__name__}."
        )
    _LOGGER.info("analytics_rows_loaded", rows=len(payload))
    return payload


async def load_summary_document(
    fetcher: TextFetcher,
    config: StatfeedConfig,
) -> SummaryDocument | None:
    """Fetch the optional summary document.

    Fetch and parse failures degrade to None.

    Args:
        fetcher: Text fetcher.
        config: Runtime configuration.

    Returns:
        Summary model, or None when absent or unreadable.
    """
    if not config.summary_url:
        return None
    try:
        payload = read_document(await fetcher.fetch_text(config.summary_url))
    except StatfeedIngestError as error:
        _LOGGER.warning("summary_unavailable", url=config.summary_url, reason=str(error))
        return None
    return parse_summary_document(payload)
