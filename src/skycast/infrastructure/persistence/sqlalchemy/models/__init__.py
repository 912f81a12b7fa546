"""SQLAlchemy models for the local cache."""

from skycast.infrastructure.persistence.sqlalchemy.models.base import Base
from skycast.infrastructure.persistence.sqlalchemy.models.forecast_model import (
    ForecastModel,
)
from skycast.infrastructure.persistence.sqlalchemy.models.location_model import (
    LocationModel,
)

__all__ = [
    "Base",
    "ForecastModel",
    "LocationModel",
]
