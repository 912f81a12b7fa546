"""Tests for exception classification into AppError."""

import asyncio
import errno
import json
import socket

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import OperationalError

from skycast.domain.shared import (
    CacheDeserializationError,
    CacheError,
    HttpError,
    NoConnection,
    ParseError,
    Timeout,
    UnknownError,
)
from skycast.domain.shared.app_error import DEFAULT_ERROR_MESSAGE
from skycast.infrastructure.error_mapper import to_app_error
from skycast.infrastructure.weather_api.dtos import LocationDto

REQUEST = httpx.Request("GET", "https://api.weatherapi.com/v1/search.json")


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    response = httpx.Response(status_code, request=REQUEST)
    return httpx.HTTPStatusError("status", request=REQUEST, response=response)


def _pydantic_error() -> PydanticValidationError:
    try:
        LocationDto.model_validate({"region": "nowhere"})
    except PydanticValidationError as e:
        return e
    raise AssertionError("validation should have failed")


class TestTimeouts:
    """Timeouts are checked first."""

    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectTimeout("connect timed out", request=REQUEST),
            httpx.ReadTimeout("read timed out", request=REQUEST),
            TimeoutError(),
            asyncio.TimeoutError(),
        ],
    )
    def test_timeout(self, exc):
        assert to_app_error(exc) == Timeout()


class TestConnectionErrors:
    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("Name or service not known", request=REQUEST),
            httpx.ReadError("connection reset", request=REQUEST),
            ConnectionRefusedError(),
            socket.gaierror(-2, "Name or service not known"),
            OSError(errno.EHOSTUNREACH, "No route to host"),
            OSError(errno.ENETUNREACH, "Network is unreachable"),
        ],
    )
    def test_no_connection(self, exc):
        assert to_app_error(exc) == NoConnection()


class TestHttpErrors:
    def test_status_code_and_reason(self):
        error = to_app_error(_status_error(503))

        assert error == HttpError(code=503, message="Service Unavailable")

    def test_unknown_status_falls_back_to_default_message(self):
        error = to_app_error(_status_error(599))

        assert isinstance(error, HttpError)
        assert error.code == 599
        assert error.message


class TestParseErrors:
    def test_pydantic_validation_error(self):
        exc = _pydantic_error()

        error = to_app_error(exc)

        assert isinstance(error, ParseError)
        assert error.cause is exc

    def test_json_decode_error(self):
        exc = json.JSONDecodeError("Expecting value", "<html>", 0)

        error = to_app_error(exc)

        assert isinstance(error, ParseError)
        assert "Expecting value" in error.message


class TestCacheErrors:
    def test_cache_deserialization_error(self):
        exc = CacheDeserializationError("Failed to deserialize forecast", key="Bogotá")

        assert to_app_error(exc) == CacheError("Failed to deserialize forecast")

    def test_database_error(self):
        exc = OperationalError("INSERT INTO forecasts", {}, Exception("database is locked"))

        error = to_app_error(exc)

        assert isinstance(error, CacheError)
        assert "database is locked" in error.message


class TestUnknownErrors:
    def test_other_os_error_is_unknown(self):
        error = to_app_error(OSError(errno.ENOSPC, "No space left on device"))

        assert isinstance(error, UnknownError)

    def test_arbitrary_exception(self):
        exc = RuntimeError("boom")

        error = to_app_error(exc)

        assert error == UnknownError("boom")
        assert error.cause is exc

    def test_empty_message_uses_default(self):
        assert to_app_error(RuntimeError()) == UnknownError(DEFAULT_ERROR_MESSAGE)

    def test_unprintable_exception_uses_default(self):
        class Unprintable(Exception):
            def __str__(self):
                raise ValueError("no")

        assert to_app_error(Unprintable()).message == DEFAULT_ERROR_MESSAGE
