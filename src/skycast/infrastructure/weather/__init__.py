"""Cache-first weather repositories."""

from skycast.infrastructure.weather.background import BackgroundScope
from skycast.infrastructure.weather.cache_first import (
    CacheWriteError,
    cache_first,
    first_or_none,
)
from skycast.infrastructure.weather.factory import WeatherRepositoryFactory
from skycast.infrastructure.weather.forecast_repository import (
    CacheFirstForecastRepository,
    normalize_location_name,
)
from skycast.infrastructure.weather.location_repository import (
    CacheFirstLocationRepository,
)

__all__ = [
    "BackgroundScope",
    "CacheFirstForecastRepository",
    "CacheFirstLocationRepository",
    "CacheWriteError",
    "WeatherRepositoryFactory",
    "cache_first",
    "first_or_none",
    "normalize_location_name",
]
