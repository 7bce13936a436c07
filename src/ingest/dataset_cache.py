"""In-memory dataset cache with coalesced loads.

This module maps dataset ids to parsed datasets for the lifetime of a
session. Concurrent first accesses share one in-flight load; entries are
never evicted.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, TypeVar

from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

DatasetT = TypeVar("DatasetT")
DatasetLoader = Callable[[str], Awaitable[DatasetT]]


class DatasetCache(Generic[DatasetT]):
    """Per-id cache populated at most once per identifier."""

    def __init__(self, loader: DatasetLoader[DatasetT], name: str = "dataset") -> None:
        """Create cache.

        Args:
            loader: Async callable that fetches and parses one dataset id.
            name: Cache name used in log events.
        """
        self._loader = loader
        self._name = name
        self._entries: dict[str, DatasetT] = {}
        self._in_flight: dict[str, asyncio.Task[DatasetT]] = {}

    async def get(self, dataset_id: str) -> DatasetT:
        """Return the dataset for an id, loading it on first access.

        Args:
            dataset_id: Dataset identifier.

        Returns:
            Parsed dataset.

        Raises:
            StatfeedIngestError: If the load fails; failures are not cached.
        """
        if dataset_id in self._entries:
            return self._entries[dataset_id]
        task = self._in_flight.get(dataset_id)
        if task is None:
            task = asyncio.ensure_future(self._load(dataset_id))
            self._in_flight[dataset_id] = task
        else:
            _LOGGER.debug("dataset_load_joined", cache=self._name, dataset_id=dataset_id)
        return await asyncio.shield(task)

    def contains(self, dataset_id: str) -> bool:
        """Return whether a dataset id has a completed entry."""
        return dataset_id in self._entries

    def is_loading(self, dataset_id: str) -> bool:
        """Return whether a load for the id is in flight."""
        return dataset_id in self._in_flight

    def __len__(self) -> int:
        return len(self._entries)

    async def _load(self, dataset_id: str) -> DatasetT:
        try:
            dataset = await self._loader(dataset_id)
        except Exception as error:
            _LOGGER.warning(
                "dataset_load_failed",
                cache=self._name,
                dataset_id=dataset_id,
                reason=str(error),
            )
            raise
        finally:
            self._in_flight.pop(dataset_id, None)
        self._entries[dataset_id] = dataset
        _LOGGER.info("dataset_cached", cache=self._name, dataset_id=dataset_id)
        return dataset
