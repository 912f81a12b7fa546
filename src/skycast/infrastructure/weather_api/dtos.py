"""Wire models for the WeatherAPI.com JSON responses."""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ConditionDto(_WireModel):
    text: str
    icon: str


class DayDto(_WireModel):
    avg_temp_c: float = Field(alias="avgtemp_c")
    condition: ConditionDto


class ForecastDayDto(_WireModel):
    date: str
    day: DayDto


class ForecastDto(_WireModel):
    forecastday: list[ForecastDayDto]


class LocationDto(_WireModel):
    # id and url are only returned by the search endpoint
    id: int | None = None
    name: str
    region: str | None = None
    country: str
    lat: float | None = None
    lon: float | None = None
    url: str | None = None


class ForecastResponseDto(_WireModel):
    location: LocationDto
    forecast: ForecastDto
