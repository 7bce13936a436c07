"""Async HTTP text fetcher.

This module wraps ``httpx.AsyncClient`` and turns non-2xx responses and
transport failures into ``FetchFailedError`` before any parsing.
No retries are attempted.
"""

from __future__ import annotations

from typing import Mapping, Protocol

import httpx

from core.config import StatfeedConfig
from core.errors import FetchFailedError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class TextFetcher(Protocol):
    """Anything that can fetch a URL body as text."""

    async def fetch_text(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Return the response body for ``url``."""


class HttpTextFetcher:
    """``httpx``-backed fetcher usable as an async context manager."""

    def __init__(
        self,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a fetcher.

        Args:
            timeout_seconds: Per-request timeout.
            transport: Optional transport override, used by tests.
        """
        self._timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: StatfeedConfig) -> "HttpTextFetcher":
        """Build a fetcher from runtime configuration."""
        return cls(timeout_seconds=config.request_timeout_seconds)

    async def __aenter__(self) -> "HttpTextFetcher":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch_text(self, url: str, params: Mapping[str, str] | None = None) -> str:
        """Fetch a URL and return its decoded body.

        Args:
            url: Absolute URL.
            params: Optional query parameters.

        Returns:
            Response body text.

        Raises:
            FetchFailedError: On a non-2xx status or transport failure.
        """
        client = self._ensure_client()
        try:
            response = await client.get(url, params=dict(params) if params else None)
        except httpx.RequestError as error:
            _LOGGER.error("fetch_transport_failed", url=url, reason=str(error))
            raise FetchFailedError(
                f"Failed to fetch {url}: {error}. Check network access and the endpoint URL.",
                url=url,
            ) from error
        if not response.is_success:
            _LOGGER.error("fetch_status_failed", url=url, status_code=response.status_code)
            raise FetchFailedError(
                f"Failed to fetch {url}: {response.status_code} {response.reason_phrase}.",
                url=url,
                status_code=response.status_code,
            )
        _LOGGER.debug("fetch_succeeded", url=url, bytes=len(response.content))
        return response.text

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client
