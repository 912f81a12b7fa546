"""HTTP client for the WeatherAPI.com REST API."""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter

from .dtos import ForecastResponseDto, LocationDto

logger = logging.getLogger(__name__)

_LOCATION_LIST = TypeAdapter(list[LocationDto])


class WeatherApiClient:
    """Async wrapper around the ``search.json`` and ``forecast.json`` endpoints.

    Transport, status and decoding failures propagate as raised by httpx and
    pydantic so the caller can classify them.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, path: str, params: dict[str, str | int]) -> object:
        client = await self._get_client()
        response = await client.get(path, params={"key": self._api_key, **params})
        if response.is_error:
            logger.debug(
                "WeatherAPI %s returned %d: %s",
                path,
                response.status_code,
                response.text[:200] if response.text else "no body",
            )
        response.raise_for_status()
        return response.json()

    async def search_locations(self, query: str) -> list[LocationDto]:
        data = await self._get_json("/search.json", {"q": query})
        locations = _LOCATION_LIST.validate_python(data)
        logger.debug("WeatherAPI search %r returned %d location(s)", query, len(locations))
        return locations

    async def get_forecast(self, location_name: str, days: int) -> ForecastResponseDto:
        data = await self._get_json(
            "/forecast.json",
            {"q": location_name, "days": days},
        )
        return ForecastResponseDto.model_validate(data)
