"""Weather queries."""

from skycast.application.queries.weather.get_forecast_query import (
    MAX_FORECAST_DAYS,
    GetForecastQuery,
)
from skycast.application.queries.weather.search_locations_query import (
    MIN_QUERY_LENGTH,
    SearchLocationsQuery,
)

__all__ = [
    "MAX_FORECAST_DAYS",
    "MIN_QUERY_LENGTH",
    "GetForecastQuery",
    "SearchLocationsQuery",
]
