"""Repository interfaces for the weather domain."""

from skycast.domain.weather.repositories.forecast_repository import (
    DEFAULT_FORECAST_DAYS,
    ForecastRepository,
)
from skycast.domain.weather.repositories.location_repository import (
    LocationRepository,
)

__all__ = [
    "DEFAULT_FORECAST_DAYS",
    "ForecastRepository",
    "LocationRepository",
]
