"""Ports the cache-first orchestrators consume from the cache store."""

from typing import AsyncIterator, Protocol

from skycast.infrastructure.persistence.records import (
    ForecastCacheRecord,
    LocationCacheRecord,
)


class LocationCachePort(Protocol):
    """Multi-row cache of search hits, partitioned by query."""

    def observe(self, query: str) -> AsyncIterator[list[LocationCacheRecord]]:
        """Yield rows cached under queries starting with ``query``, then again on every write."""
        ...

    async def clear_by_query(self, query: str) -> int:
        ...

    async def insert_all(self, records: list[LocationCacheRecord]) -> None:
        ...

    async def replace_for_query(
        self,
        query: str,
        records: list[LocationCacheRecord],
    ) -> None:
        """Clear ``query`` and insert ``records`` atomically."""
        ...


class ForecastCachePort(Protocol):
    """Single-row-per-key cache of forecast responses."""

    def observe(self, location_name: str) -> AsyncIterator[ForecastCacheRecord | None]:
        """Yield the row for ``location_name`` (or None), then again on every write."""
        ...

    async def upsert(self, record: ForecastCacheRecord) -> None:
        ...
