"""Maps raised exceptions to the closed ``AppError`` taxonomy.

Order matters, the first matching rule wins:

1. timeouts                          -> Timeout
2. unreachable host / refused socket -> NoConnection
3. HTTP status errors                -> HttpError
4. response decoding failures        -> ParseError
5. local cache read/write failures   -> CacheError
6. anything else                     -> UnknownError
"""

from __future__ import annotations

import errno
import json
import socket

import httpx
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from skycast.domain.shared.app_error import (
    DEFAULT_ERROR_MESSAGE,
    AppError,
    CacheError,
    HttpError,
    NoConnection,
    ParseError,
    Timeout,
    UnknownError,
)
from skycast.domain.shared.exceptions import CacheDeserializationError

DEFAULT_HTTP_MESSAGE = "HTTP error"
DEFAULT_PARSE_MESSAGE = "Failed to parse data"
DEFAULT_CACHE_READ_MESSAGE = "Failed to deserialize cached data"
DEFAULT_DATABASE_MESSAGE = "Database error occurred"

_TIMEOUT_ERRORS = (httpx.TimeoutException, TimeoutError)
_CONNECTION_ERRORS = (
    httpx.ConnectError,
    httpx.NetworkError,
    ConnectionError,
    socket.gaierror,
)
# Plain OSErrors that still mean the host could not be reached
_UNREACHABLE_ERRNOS = frozenset({errno.EHOSTUNREACH, errno.ENETUNREACH, errno.ENETDOWN})
_PARSE_ERRORS = (PydanticValidationError, json.JSONDecodeError)


def _message_of(exc: BaseException, default: str) -> str:
    try:
        message = str(exc).strip()
    except Exception:  # noqa: BLE001 - classification is total
        return default
    return message or default


def _http_error(exc: httpx.HTTPStatusError) -> HttpError:
    response = exc.response
    return HttpError(
        code=response.status_code,
        message=response.reason_phrase or DEFAULT_HTTP_MESSAGE,
    )


def to_app_error(exc: BaseException) -> AppError:
    """Classify ``exc``; never raises and never returns an unmapped value."""
    if isinstance(exc, _TIMEOUT_ERRORS):
        return Timeout()

    if isinstance(exc, _CONNECTION_ERRORS):
        return NoConnection()

    if isinstance(exc, OSError) and exc.errno in _UNREACHABLE_ERRNOS:
        return NoConnection()

    if isinstance(exc, httpx.HTTPStatusError):
        return _http_error(exc)

    if isinstance(exc, _PARSE_ERRORS):
        return ParseError(message=_message_of(exc, DEFAULT_PARSE_MESSAGE), cause=exc)

    if isinstance(exc, CacheDeserializationError):
        return CacheError(message=exc.message or DEFAULT_CACHE_READ_MESSAGE)

    if isinstance(exc, SQLAlchemyError):
        return CacheError(message=_message_of(exc, DEFAULT_DATABASE_MESSAGE))

    return UnknownError(message=_message_of(exc, DEFAULT_ERROR_MESSAGE), cause=exc)
