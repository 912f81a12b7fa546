"""Cache records exchanged between the cache store and the orchestrators.

These are persistence shapes, not domain objects: a location row carries
the query it was cached under, a forecast row carries the raw response JSON.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LocationCacheRecord:
    """One cached search hit, keyed by the query that produced it."""

    location_id: int | None
    name: str
    region: str | None
    country: str
    lat: float | None
    lon: float | None
    url: str | None
    query: str
    cached_at: datetime


@dataclass(frozen=True)
class ForecastCacheRecord:
    """Cached forecast response, keyed by location name."""

    location_name: str
    serialized_forecast: str
    last_updated: datetime
