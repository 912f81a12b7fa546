"""Forecast value objects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ForecastDay:
    """Daily summary for one forecast date (ISO ``YYYY-MM-DD``)."""

    date: str
    avg_temp_c: float
    condition_text: str
    condition_icon_url: str


@dataclass(frozen=True)
class Forecast:
    """Ordered daily forecast for a named location."""

    location_name: str
    days: tuple[ForecastDay, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "days", tuple(self.days))
