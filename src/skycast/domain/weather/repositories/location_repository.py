"""Location repository interface - Weather domain."""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from skycast.domain.shared.result_state import ResultState
from skycast.domain.weather.value_objects import Location


class LocationRepository(ABC):
    """Repository for searching locations by free-text query."""

    @abstractmethod
    def search_locations(
        self,
        query: str,
    ) -> AsyncIterator[ResultState[list[Location]]]:
        """Search locations whose name matches ``query``.

        Parameters
        ----------
        query
            Raw search text, already validated by the caller

        Returns
        -------
        Lazy stream of result envelopes: one ``Loading`` (with cached
        matches, if any) followed by one terminal ``Success``/``Failure``.
        """
