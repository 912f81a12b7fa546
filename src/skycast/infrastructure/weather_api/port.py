from typing import Protocol

from .dtos import ForecastResponseDto, LocationDto


class WeatherApiPort(Protocol):
    """Port for the remote weather source.

    Implementations raise on failure; classification happens upstream.
    """

    async def search_locations(self, query: str) -> list[LocationDto]:
        """Search locations matching ``query``."""
        ...

    async def get_forecast(self, location_name: str, days: int) -> ForecastResponseDto:
        """Fetch the daily forecast for ``location_name``."""
        ...
