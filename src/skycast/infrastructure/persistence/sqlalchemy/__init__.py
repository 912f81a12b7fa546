"""SQLAlchemy persistence layer for the local cache."""

from .engine import (
    create_engine_for_url,
    create_session_maker,
)
from .init_db import create_tables, drop_tables, reset_tables
from .models import Base, ForecastModel, LocationModel
from .repositories import (
    ChangeNotifier,
    ForecastCacheRepositorySQLAlchemy,
    LocationCacheRepositorySQLAlchemy,
)

__all__ = [
    # Engine
    "create_engine_for_url",
    "create_session_maker",
    # Schema
    "create_tables",
    "drop_tables",
    "reset_tables",
    # Tables
    "Base",
    "ForecastModel",
    "LocationModel",
    # Repositories
    "ChangeNotifier",
    "ForecastCacheRepositorySQLAlchemy",
    "LocationCacheRepositorySQLAlchemy",
]
