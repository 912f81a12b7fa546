"""WeatherAPI.com integration."""

from skycast.infrastructure.weather_api.client import WeatherApiClient
from skycast.infrastructure.weather_api.dtos import (
    ConditionDto,
    DayDto,
    ForecastDayDto,
    ForecastDto,
    ForecastResponseDto,
    LocationDto,
)
from skycast.infrastructure.weather_api.port import WeatherApiPort

__all__ = [
    "ConditionDto",
    "DayDto",
    "ForecastDayDto",
    "ForecastDto",
    "ForecastResponseDto",
    "LocationDto",
    "WeatherApiClient",
    "WeatherApiPort",
]
