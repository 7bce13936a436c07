"""Shared pytest fixtures for repository test runs."""

from __future__ import annotations

import pytest

from core.config import StatfeedConfig
from tests.fake_fetcher import (
    ANALYTICS_URL,
    BASE_URL,
    MOBILITY_URL,
    SUMMARY_URL,
    FakeTextFetcher,
)
from tests.fixture_paths import fixture_path


@pytest.fixture
def statfeed_config() -> StatfeedConfig:
    """Config pointing every feed at fake test URLs."""
    return StatfeedConfig(
        immigration_base_url=BASE_URL,
        mobility_url=MOBILITY_URL,
        summary_url=SUMMARY_URL,
        analytics_url=ANALYTICS_URL,
        analytics_start_date="2023-01-01",
        analytics_end_date="today",
        request_timeout_seconds=5.0,
        log_level="info",
    )


@pytest.fixture
def feed_fetcher() -> FakeTextFetcher:
    """Fake fetcher serving the feed fixtures."""
    return FakeTextFetcher(
        {
            f"{BASE_URL}oitaairport.json": _read_fixture("feeds/oitaairport.json"),
            f"{BASE_URL}emptyport.json": "{}",
            MOBILITY_URL: _read_fixture("feeds/mobility_rows.ndjson"),
            SUMMARY_URL: _read_fixture("feeds/summary.json"),
            ANALYTICS_URL: _read_fixture("feeds/analytics_rows.json"),
        }
    )


def _read_fixture(relative_path: str) -> str:
    return fixture_path(relative_path).read_text(encoding="utf-8")
