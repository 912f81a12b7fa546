"""Cache-first forecast lookup."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from skycast.domain.shared.result_state import ResultState
from skycast.domain.weather.repositories import DEFAULT_FORECAST_DAYS, ForecastRepository
from skycast.domain.weather.value_objects import Forecast
from skycast.infrastructure.persistence.ports import ForecastCachePort
from skycast.infrastructure.weather_api.mappers import (
    forecast_from_dto,
    forecast_from_record,
    forecast_record_from_dto,
)
from skycast.infrastructure.weather_api.port import WeatherApiPort

from .background import BackgroundScope
from .cache_first import cache_first, first_or_none, persist

logger = logging.getLogger(__name__)


def normalize_location_name(location_name: str) -> str:
    """Cache key for a location: the name without surrounding whitespace."""
    return location_name.strip()


class CacheFirstForecastRepository(ForecastRepository):
    """Serves the cached forecast at once and refreshes it from WeatherAPI."""

    def __init__(
        self,
        weather_api: WeatherApiPort,
        forecast_cache: ForecastCachePort,
        scope: BackgroundScope | None = None,
    ):
        self._api = weather_api
        self._cache = forecast_cache
        self._scope = scope or BackgroundScope("forecast-refresh")

    @property
    def scope(self) -> BackgroundScope:
        return self._scope

    def get_forecast(
        self,
        location_name: str,
        days: int = DEFAULT_FORECAST_DAYS,
    ) -> AsyncIterator[ResultState[Forecast]]:
        key = normalize_location_name(location_name)
        return cache_first(
            key=key,
            read_cached=lambda: self._read_cached(key),
            fetch_and_store=lambda: self._fetch_and_store(key, days),
            scope=self._scope,
        )

    async def _read_cached(self, key: str) -> Forecast | None:
        record = await first_or_none(self._cache.observe(key))
        if record is None:
            return None
        return forecast_from_record(record)

    async def _fetch_and_store(self, key: str, days: int) -> Forecast:
        response = await self._api.get_forecast(key, days)
        record = forecast_record_from_dto(response, key)
        forecast = forecast_from_dto(response)

        await persist(self._cache.upsert(record))
        logger.debug("Refreshed %d-day forecast for %r", len(forecast.days), key)
        return forecast
