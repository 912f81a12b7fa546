"""Cache repositories backed by SQLAlchemy."""

from ._notifier import ChangeNotifier
from .forecast_cache_repository import ForecastCacheRepositorySQLAlchemy
from .location_cache_repository import LocationCacheRepositorySQLAlchemy

__all__ = [
    "ChangeNotifier",
    "ForecastCacheRepositorySQLAlchemy",
    "LocationCacheRepositorySQLAlchemy",
]
