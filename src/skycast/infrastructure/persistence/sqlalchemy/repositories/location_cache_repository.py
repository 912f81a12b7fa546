"""SQLAlchemy implementation of the location search cache."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skycast.domain.shared.time import ensure_tz_aware
from skycast.infrastructure.persistence.records import LocationCacheRecord
from skycast.infrastructure.persistence.sqlalchemy.models import LocationModel

from ._notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class LocationCacheRepositorySQLAlchemy:
    """Cache of search hits, partitioned by the query that produced them.

    Reads match by query prefix, so results cached for "bogo" also show up
    while the user is still typing "bog". Writes replace a whole query
    partition in one transaction.
    """

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        notifier: ChangeNotifier | None = None,
    ):
        self._session_maker = session_maker
        self._notifier = notifier or ChangeNotifier()

    async def find_by_query_prefix(self, query: str) -> list[LocationCacheRecord]:
        """Return cached rows whose query starts with ``query``.

        A location cached under several matching queries is returned once,
        from its most recent write.
        """
        stmt = (
            select(LocationModel)
            .where(LocationModel.query.startswith(query, autoescape=True))
            .order_by(LocationModel.row_id.desc())
        )
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()

        newest_first: dict[object, LocationCacheRecord] = {}
        for model in models:
            key = self._identity(model)
            if key not in newest_first:
                newest_first[key] = self._to_record(model)
        # Restore insertion order
        return list(reversed(newest_first.values()))

    async def observe(self, query: str) -> AsyncIterator[list[LocationCacheRecord]]:
        """Yield the current prefix matches, then re-yield after every write."""
        while True:
            seen_version = self._notifier.version
            yield await self.find_by_query_prefix(query)
            await self._notifier.wait_for_change(seen_version)

    async def clear_by_query(self, query: str) -> int:
        """Delete rows cached under exactly ``query``. Returns count of deleted."""
        async with self._session_maker() as session, session.begin():
            result = await session.execute(
                delete(LocationModel).where(LocationModel.query == query)
            )
        await self._notifier.notify()
        return result.rowcount or 0  # type: ignore[union-attr]

    async def insert_all(self, records: list[LocationCacheRecord]) -> None:
        if not records:
            return
        async with self._session_maker() as session, session.begin():
            session.add_all([self._to_model(record) for record in records])
        await self._notifier.notify()

    async def replace_for_query(
        self,
        query: str,
        records: list[LocationCacheRecord],
    ) -> None:
        """Clear the ``query`` partition and insert ``records`` atomically.

        Both statements share one transaction, so a concurrent reader sees
        either the old rows or the new ones, never a mix or an empty gap.
        """
        async with self._session_maker() as session, session.begin():
            await session.execute(
                delete(LocationModel).where(LocationModel.query == query)
            )
            session.add_all([self._to_model(record) for record in records])
        logger.debug("Cached %d location(s) for query %r", len(records), query)
        await self._notifier.notify()

    @staticmethod
    def _identity(model: LocationModel) -> object:
        if model.location_id is not None:
            return model.location_id
        return (model.name, model.region, model.country)

    @staticmethod
    def _to_model(record: LocationCacheRecord) -> LocationModel:
        return LocationModel(
            location_id=record.location_id,
            name=record.name,
            region=record.region,
            country=record.country,
            lat=record.lat,
            lon=record.lon,
            url=record.url,
            query=record.query,
            cached_at=record.cached_at,
        )

    @staticmethod
    def _to_record(model: LocationModel) -> LocationCacheRecord:
        return LocationCacheRecord(
            location_id=model.location_id,
            name=model.name,
            region=model.region,
            country=model.country,
            lat=model.lat,
            lon=model.lon,
            url=model.url,
            query=model.query,
            cached_at=ensure_tz_aware(model.cached_at),
        )
