"""In-memory text fetcher for async tests."""

from __future__ import annotations

import asyncio
from typing import Mapping

from core.errors import FetchFailedError

BASE_URL = "https://feeds.test/immigration/"
MOBILITY_URL = "https://feeds.test/mobility.ndjson"
SUMMARY_URL = "https://feeds.test/summary.json"
ANALYTICS_URL = "https://feeds.test/analytics"


class FakeTextFetcher:
    """Serve canned bodies by URL and record every request."""

    def __init__(self, bodies: Mapping[str, str | Exception]) -> None:
        self.bodies = dict(bodies)
        self.requests: list[tuple[str, dict[str, str] | None]] = []
        self.gates: dict[str, asyncio.Event] = {}

    def hold(self, url: str) -> asyncio.Event:
        """Block responses for ``url`` until the returned event is set."""
        event = asyncio.Event()
        self.gates[url] = event
        return event

    def request_count(self, url: str) -> int:
        return sum(1 for requested_url, _ in self.requests if requested_url == url)

    async def fetch_text(self, url: str, params: Mapping[str, str] | None = None) -> str:
        self.requests.append((url, dict(params) if params else None))
        gate = self.gates.get(url)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)
        body = self.bodies.get(url)
        if body is None:
            raise FetchFailedError(f"Failed to fetch {url}: 404 Not Found.", url=url, status_code=404)
        if isinstance(body, Exception):
            raise body
        return body

    async def __aenter__(self) -> "FakeTextFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None
