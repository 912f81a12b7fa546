"""Tests for DTO, record and domain translations."""

import pytest

from skycast.domain.shared import CacheDeserializationError
from skycast.infrastructure.persistence.records import ForecastCacheRecord
from skycast.infrastructure.weather_api.dtos import LocationDto
from skycast.infrastructure.weather_api.mappers import (
    absolute_icon_url,
    forecast_from_dto,
    forecast_from_record,
    forecast_record_from_dto,
    location_from_dto,
    location_from_record,
    location_record_from_dto,
)
from tests.shared.builders import (
    FIXED_NOW,
    make_forecast_record,
    make_forecast_response,
    make_location_dto,
)


class TestIconUrl:
    def test_protocol_relative_url_gets_https(self):
        assert (
            absolute_icon_url("//cdn.weatherapi.com/weather/64x64/day/113.png")
            == "https://cdn.weatherapi.com/weather/64x64/day/113.png"
        )

    def test_absolute_url_untouched(self):
        assert absolute_icon_url("http://example.com/a.png") == "http://example.com/a.png"


class TestLocationMapping:
    """Tests for location translations."""

    def test_wire_field_names(self):
        dto = LocationDto.model_validate(
            {
                "id": 2618724,
                "name": "Bogotá",
                "region": "Bogota D.C.",
                "country": "Colombia",
                "lat": 4.6,
                "lon": -74.08,
                "url": "bogota-bogota-d.c.-colombia",
                "tz_id": "America/Bogota",
            }
        )

        location = location_from_dto(dto)

        assert location.name == "Bogotá"
        assert location.country == "Colombia"
        assert location.id == 2618724

    def test_record_carries_query_key(self):
        record = location_record_from_dto(make_location_dto(), "bogo")

        assert record.query == "bogo"
        assert record.cached_at.tzinfo is not None

    def test_record_round_trip_keeps_fields(self):
        dto = make_location_dto()

        record = location_record_from_dto(dto, "bogota")

        assert location_from_record(record) == location_from_dto(dto)


class TestForecastMapping:
    """Tests for forecast translations."""

    def test_forecast_from_dto(self):
        forecast = forecast_from_dto(make_forecast_response(days=3))

        assert forecast.location_name == "Bogotá"
        assert len(forecast.days) == 3
        assert forecast.days[0].date == "2025-01-15"
        assert forecast.days[0].avg_temp_c == 14.0
        assert forecast.days[0].condition_text == "Sunny"
        assert forecast.days[0].condition_icon_url.startswith("https://")

    def test_wire_avgtemp_alias(self):
        response = make_forecast_response(days=1)

        dumped = response.model_dump(by_alias=True)

        assert "avgtemp_c" in dumped["forecast"]["forecastday"][0]["day"]

    def test_record_keyed_by_requested_name(self):
        record = forecast_record_from_dto(make_forecast_response("Bogotá"), "Bogota")

        assert record.location_name == "Bogota"
        assert record.last_updated.tzinfo is not None

    def test_record_decodes_to_same_forecast(self):
        response = make_forecast_response(days=2)

        record = forecast_record_from_dto(response, "Bogotá")

        assert forecast_from_record(record) == forecast_from_dto(response)

    def test_builder_record_decodes(self):
        forecast = forecast_from_record(make_forecast_record(days=5))

        assert len(forecast.days) == 5


class TestForecastDecodingFailures:
    """Corrupt cached payloads raise CacheDeserializationError."""

    @pytest.mark.parametrize("payload", ["", "not json", '{"location": {}}'])
    def test_corrupt_payload(self, payload):
        record = ForecastCacheRecord(
            location_name="Bogotá",
            serialized_forecast=payload,
            last_updated=FIXED_NOW,
        )

        with pytest.raises(CacheDeserializationError) as exc_info:
            forecast_from_record(record)

        assert exc_info.value.details["key"] == "Bogotá"
