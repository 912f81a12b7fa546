"""Forecast repository interface - Weather domain."""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from skycast.domain.shared.result_state import ResultState
from skycast.domain.weather.value_objects import Forecast

DEFAULT_FORECAST_DAYS = 3


class ForecastRepository(ABC):
    """Repository for daily forecasts of a named location."""

    @abstractmethod
    def get_forecast(
        self,
        location_name: str,
        days: int = DEFAULT_FORECAST_DAYS,
    ) -> AsyncIterator[ResultState[Forecast]]:
        """Get the forecast for ``location_name``.

        Parameters
        ----------
        location_name
            Location name used as lookup key (exact match)
        days
            Number of forecast days to request

        Returns
        -------
        Lazy stream of result envelopes: one ``Loading`` (with the cached
        forecast, if any) followed by one terminal ``Success``/``Failure``.
        """
