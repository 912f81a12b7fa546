"""Composition root wiring settings, cache store, HTTP client and repositories."""

from __future__ import annotations

import logging

from skycast.config.settings import Settings
from skycast.infrastructure.persistence.sqlalchemy import (
    ChangeNotifier,
    ForecastCacheRepositorySQLAlchemy,
    LocationCacheRepositorySQLAlchemy,
    create_engine_for_url,
    create_session_maker,
    create_tables,
)
from skycast.infrastructure.weather_api import WeatherApiClient

from .background import BackgroundScope
from .forecast_repository import CacheFirstForecastRepository
from .location_repository import CacheFirstLocationRepository

logger = logging.getLogger(__name__)


class WeatherRepositoryFactory:
    """Owns the long-lived resources behind the weather repositories.

    Use as an async context manager: tables are created on entry, pending
    refreshes are awaited and connections released on exit.
    """

    def __init__(self, settings: Settings):
        self._engine = create_engine_for_url(
            settings.database_url,
            echo=settings.database_echo,
        )
        session_maker = create_session_maker(self._engine)
        self._api = WeatherApiClient(
            base_url=settings.weather_api_base_url,
            api_key=settings.weather_api_key,
            timeout=settings.weather_api_timeout,
        )
        self._scope = BackgroundScope("weather-refresh")
        self._location_cache = LocationCacheRepositorySQLAlchemy(
            session_maker, ChangeNotifier()
        )
        self._forecast_cache = ForecastCacheRepositorySQLAlchemy(
            session_maker, ChangeNotifier()
        )
        self._locations: CacheFirstLocationRepository | None = None
        self._forecasts: CacheFirstForecastRepository | None = None

    def location_repository(self) -> CacheFirstLocationRepository:
        if self._locations is None:
            self._locations = CacheFirstLocationRepository(
                self._api, self._location_cache, self._scope
            )
        return self._locations

    def forecast_repository(self) -> CacheFirstForecastRepository:
        if self._forecasts is None:
            self._forecasts = CacheFirstForecastRepository(
                self._api, self._forecast_cache, self._scope
            )
        return self._forecasts

    async def wait_for_refreshes(self) -> None:
        """Block until every background refresh launched so far has finished."""
        await self._scope.join()

    async def __aenter__(self) -> WeatherRepositoryFactory:
        await create_tables(self._engine)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._scope.join()
        await self._scope.aclose()
        await self._api.close()
        await self._engine.dispose()
        logger.debug("Weather repositories closed")
