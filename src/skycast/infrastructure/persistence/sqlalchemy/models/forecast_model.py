"""SQLAlchemy model for cached forecasts."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from skycast.domain.shared.time import utc_now
from skycast.infrastructure.persistence.sqlalchemy.models.base import Base


class ForecastModel(Base):
    """Database model for one forecast response per location name.

    The response is stored as JSON rather than normalised into day rows.
    """

    __tablename__ = "forecasts"

    location_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    serialized_forecast: Mapped[str] = mapped_column(Text, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
