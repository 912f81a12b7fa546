"""SQLAlchemy implementation of the forecast cache."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skycast.domain.shared.time import ensure_tz_aware
from skycast.infrastructure.persistence.records import ForecastCacheRecord
from skycast.infrastructure.persistence.sqlalchemy.models import ForecastModel

from ._notifier import ChangeNotifier

logger = logging.getLogger(__name__)


class ForecastCacheRepositorySQLAlchemy:
    """One forecast row per location name; the latest write wins."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        notifier: ChangeNotifier | None = None,
    ):
        self._session_maker = session_maker
        self._notifier = notifier or ChangeNotifier()

    async def find_by_location_name(
        self,
        location_name: str,
    ) -> ForecastCacheRecord | None:
        stmt = select(ForecastModel).where(ForecastModel.location_name == location_name)
        async with self._session_maker() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None
        return ForecastCacheRecord(
            location_name=model.location_name,
            serialized_forecast=model.serialized_forecast,
            last_updated=ensure_tz_aware(model.last_updated),
        )

    async def observe(
        self,
        location_name: str,
    ) -> AsyncIterator[ForecastCacheRecord | None]:
        """Yield the current row (or None), then re-yield after every write."""
        while True:
            seen_version = self._notifier.version
            yield await self.find_by_location_name(location_name)
            await self._notifier.wait_for_change(seen_version)

    async def upsert(self, record: ForecastCacheRecord) -> None:
        """Insert or replace the forecast stored under ``record.location_name``."""
        async with self._session_maker() as session, session.begin():
            await session.merge(
                ForecastModel(
                    location_name=record.location_name,
                    serialized_forecast=record.serialized_forecast,
                    last_updated=record.last_updated,
                )
            )
        logger.debug("Cached forecast for %r", record.location_name)
        await self._notifier.notify()
