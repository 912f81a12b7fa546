"""Get forecast query - cache-first daily forecast for a location."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from skycast.domain.shared.exceptions import ValidationError
from skycast.domain.shared.result_state import ResultState
from skycast.domain.weather.repositories import DEFAULT_FORECAST_DAYS, ForecastRepository
from skycast.domain.weather.value_objects import Forecast

if TYPE_CHECKING:
    from skycast.infrastructure.weather import WeatherRepositoryFactory

# WeatherAPI serves at most 14 forecast days
MAX_FORECAST_DAYS = 14


class GetForecastQuery:
    """Query to get the daily forecast for a location name."""

    def __init__(self, forecast_repository: ForecastRepository):
        self._forecast_repo = forecast_repository

    @classmethod
    def from_factory(cls, factory: WeatherRepositoryFactory) -> GetForecastQuery:
        return cls(forecast_repository=factory.forecast_repository())

    def execute(
        self,
        location_name: str,
        days: int = DEFAULT_FORECAST_DAYS,
    ) -> AsyncIterator[ResultState[Forecast]]:
        if not 1 <= days <= MAX_FORECAST_DAYS:
            raise ValidationError(
                f"days must be between 1 and {MAX_FORECAST_DAYS}, got {days}",
                field="days",
            )
        return self._forecast_repo.get_forecast(location_name, days)
