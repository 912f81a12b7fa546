"""Weather value objects."""

from skycast.domain.weather.value_objects.forecast import Forecast, ForecastDay
from skycast.domain.weather.value_objects.location import Location

__all__ = [
    "Forecast",
    "ForecastDay",
    "Location",
]
