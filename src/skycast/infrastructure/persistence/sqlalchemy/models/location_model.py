"""SQLAlchemy model for cached location search hits."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from skycast.domain.shared.time import utc_now
from skycast.infrastructure.persistence.sqlalchemy.models.base import Base


class LocationModel(Base):
    """Database model for one location cached under a search query.

    The same place can be cached under several queries ("bog", "bogo"),
    so rows get a surrogate key rather than the WeatherAPI location id.
    """

    __tablename__ = "locations"

    __table_args__ = (Index("idx_locations_query", "query"),)

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    location_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    region: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    lat: Mapped[float | None] = mapped_column(Float, nullable=True)
    lon: Mapped[float | None] = mapped_column(Float, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Cache concern only; never part of the domain model
    query: Mapped[str] = mapped_column(String(255), nullable=False)
    cached_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
