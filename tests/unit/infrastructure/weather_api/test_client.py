"""Tests for WeatherApiClient against a mocked HTTP transport."""

import json

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError

from skycast.infrastructure.weather_api import WeatherApiClient
from tests.shared.builders import make_forecast_response

SEARCH_BODY = [
    {
        "id": 2618724,
        "name": "Bogotá",
        "region": "Bogota D.C.",
        "country": "Colombia",
        "lat": 4.6,
        "lon": -74.08,
        "url": "bogota-bogota-d.c.-colombia",
    }
]


def _client(handler) -> WeatherApiClient:
    return WeatherApiClient(
        base_url="https://api.weatherapi.com/v1/",
        api_key="test-key",
        transport=httpx.MockTransport(handler),
    )


class TestClientInit:
    def test_base_url_trailing_slash_removed(self):
        client = WeatherApiClient(base_url="https://api.weatherapi.com/v1/", api_key="k")

        assert client._base_url == "https://api.weatherapi.com/v1"

    @pytest.mark.asyncio
    async def test_close_without_requests(self):
        client = WeatherApiClient(base_url="https://api.weatherapi.com/v1", api_key="k")

        await client.close()

        assert client._client is None


class TestSearchLocations:
    """Tests for the search.json endpoint."""

    @pytest.mark.asyncio
    async def test_sends_query_and_key(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=SEARCH_BODY)

        client = _client(handler)
        try:
            locations = await client.search_locations("Bogota")
        finally:
            await client.close()

        assert seen[0].url.path == "/v1/search.json"
        assert seen[0].url.params["q"] == "Bogota"
        assert seen[0].url.params["key"] == "test-key"
        assert [loc.name for loc in locations] == ["Bogotá"]

    @pytest.mark.asyncio
    async def test_empty_result(self):
        client = _client(lambda request: httpx.Response(200, json=[]))
        try:
            assert await client.search_locations("xyz123") == []
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_status_error_propagates(self):
        client = _client(
            lambda request: httpx.Response(401, json={"error": {"message": "API key invalid"}})
        )
        try:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await client.search_locations("Bogota")
        finally:
            await client.close()

        assert exc_info.value.response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_json_propagates(self):
        client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        try:
            with pytest.raises(json.JSONDecodeError):
                await client.search_locations("Bogota")
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_unexpected_shape_propagates(self):
        client = _client(lambda request: httpx.Response(200, json={"not": "a list"}))
        try:
            with pytest.raises(PydanticValidationError):
                await client.search_locations("Bogota")
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_connect_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Name or service not known", request=request)

        client = _client(handler)
        try:
            with pytest.raises(httpx.ConnectError):
                await client.search_locations("Bogota")
        finally:
            await client.close()


class TestGetForecast:
    """Tests for the forecast.json endpoint."""

    @pytest.mark.asyncio
    async def test_sends_location_and_days(self):
        seen: list[httpx.Request] = []
        body = make_forecast_response("Bogotá", days=3).model_dump(by_alias=True)

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=body)

        client = _client(handler)
        try:
            response = await client.get_forecast("Bogotá", 3)
        finally:
            await client.close()

        assert seen[0].url.path == "/v1/forecast.json"
        assert seen[0].url.params["q"] == "Bogotá"
        assert seen[0].url.params["days"] == "3"
        assert response.location.name == "Bogotá"
        assert len(response.forecast.forecastday) == 3
        assert response.forecast.forecastday[0].day.avg_temp_c == 14.0
