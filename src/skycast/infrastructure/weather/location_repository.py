"""Cache-first location search."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from skycast.domain.shared.result_state import ResultState
from skycast.domain.weather.repositories import LocationRepository
from skycast.domain.weather.value_objects import Location
from skycast.infrastructure.persistence.ports import LocationCachePort
from skycast.infrastructure.weather_api.mappers import (
    location_from_record,
    location_record_from_dto,
)
from skycast.infrastructure.weather_api.port import WeatherApiPort

from .background import BackgroundScope
from .cache_first import cache_first, first_or_none, persist

logger = logging.getLogger(__name__)


class CacheFirstLocationRepository(LocationRepository):
    """Serves cached search hits at once and refreshes them from WeatherAPI."""

    def __init__(
        self,
        weather_api: WeatherApiPort,
        location_cache: LocationCachePort,
        scope: BackgroundScope | None = None,
    ):
        self._api = weather_api
        self._cache = location_cache
        self._scope = scope or BackgroundScope("location-refresh")

    @property
    def scope(self) -> BackgroundScope:
        return self._scope

    def search_locations(self, query: str) -> AsyncIterator[ResultState[list[Location]]]:
        return cache_first(
            key=query,
            read_cached=lambda: self._read_cached(query),
            fetch_and_store=lambda: self._fetch_and_store(query),
            scope=self._scope,
        )

    async def _read_cached(self, query: str) -> list[Location] | None:
        records = await first_or_none(self._cache.observe(query))
        locations = [location_from_record(record) for record in records or []]
        # No rows and an empty row set both mean "nothing cached"
        return locations or None

    async def _fetch_and_store(self, query: str) -> list[Location]:
        dtos = await self._api.search_locations(query)
        records = [location_record_from_dto(dto, query) for dto in dtos]
        locations = [location_from_record(record) for record in records]

        await persist(self._cache.replace_for_query(query, records))
        logger.debug("Refreshed %d location(s) for %r", len(locations), query)
        return locations
