"""Translations between wire DTOs, cache records and domain value objects."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from skycast.domain.shared.exceptions import CacheDeserializationError
from skycast.domain.shared.time import utc_now
from skycast.domain.weather.value_objects import Forecast, ForecastDay, Location
from skycast.infrastructure.persistence.records import (
    ForecastCacheRecord,
    LocationCacheRecord,
)

from .dtos import ForecastDayDto, ForecastResponseDto, LocationDto


def absolute_icon_url(icon: str) -> str:
    """WeatherAPI returns protocol-relative icon URLs (``//cdn...``)."""
    if icon.startswith("//"):
        return f"https:{icon}"
    return icon


# -------------------------------------------------------------------------
# DTO -> domain
# -------------------------------------------------------------------------


def location_from_dto(dto: LocationDto) -> Location:
    return Location(
        id=dto.id,
        name=dto.name,
        region=dto.region,
        country=dto.country,
        lat=dto.lat,
        lon=dto.lon,
        url=dto.url,
    )


def forecast_day_from_dto(dto: ForecastDayDto) -> ForecastDay:
    return ForecastDay(
        date=dto.date,
        avg_temp_c=dto.day.avg_temp_c,
        condition_text=dto.day.condition.text,
        condition_icon_url=absolute_icon_url(dto.day.condition.icon),
    )


def forecast_from_dto(dto: ForecastResponseDto) -> Forecast:
    return Forecast(
        location_name=dto.location.name,
        days=tuple(forecast_day_from_dto(day) for day in dto.forecast.forecastday),
    )


# -------------------------------------------------------------------------
# DTO -> cache record
# -------------------------------------------------------------------------


def location_record_from_dto(dto: LocationDto, query: str) -> LocationCacheRecord:
    """Attach the query key so rows can be invalidated per query."""
    return LocationCacheRecord(
        location_id=dto.id,
        name=dto.name,
        region=dto.region,
        country=dto.country,
        lat=dto.lat,
        lon=dto.lon,
        url=dto.url,
        query=query,
        cached_at=utc_now(),
    )


def forecast_record_from_dto(
    dto: ForecastResponseDto,
    location_name: str,
) -> ForecastCacheRecord:
    """Store the whole response as JSON; cache-only data needs no schema."""
    return ForecastCacheRecord(
        location_name=location_name,
        serialized_forecast=dto.model_dump_json(by_alias=True),
        last_updated=utc_now(),
    )


# -------------------------------------------------------------------------
# cache record -> domain
# -------------------------------------------------------------------------


def location_from_record(record: LocationCacheRecord) -> Location:
    return Location(
        id=record.location_id,
        name=record.name,
        region=record.region,
        country=record.country,
        lat=record.lat,
        lon=record.lon,
        url=record.url,
    )


def forecast_from_record(record: ForecastCacheRecord) -> Forecast:
    """Decode a cached forecast.

    Raises
    ------
    CacheDeserializationError
        If the stored JSON is empty, malformed or no longer matches the
        response schema.
    """
    if not record.serialized_forecast:
        raise CacheDeserializationError(
            "Failed to deserialize forecast from cache: empty payload",
            key=record.location_name,
        )
    try:
        dto = ForecastResponseDto.model_validate_json(record.serialized_forecast)
    except PydanticValidationError as e:
        raise CacheDeserializationError(
            "Failed to deserialize forecast from cache",
            key=record.location_name,
        ) from e
    return forecast_from_dto(dto)
