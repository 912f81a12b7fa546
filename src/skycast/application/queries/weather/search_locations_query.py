"""Search locations query - cache-first location search with input gating."""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator

from skycast.domain.shared.result_state import ResultState, Success
from skycast.domain.weather.repositories import LocationRepository
from skycast.domain.weather.value_objects import Location

if TYPE_CHECKING:
    from skycast.infrastructure.weather import WeatherRepositoryFactory

MIN_QUERY_LENGTH = 2


async def _empty_result() -> AsyncIterator[ResultState[list[Location]]]:
    yield Success([])


class SearchLocationsQuery:
    """Query to search locations by name.

    Queries shorter than ``MIN_QUERY_LENGTH`` characters never reach the
    repository; they resolve to a single ``Success([])``.
    """

    def __init__(self, location_repository: LocationRepository):
        self._location_repo = location_repository

    @classmethod
    def from_factory(cls, factory: WeatherRepositoryFactory) -> SearchLocationsQuery:
        return cls(location_repository=factory.location_repository())

    def execute(self, query: str) -> AsyncIterator[ResultState[list[Location]]]:
        if len(query) < MIN_QUERY_LENGTH:
            return _empty_result()
        return self._location_repo.search_locations(query)
