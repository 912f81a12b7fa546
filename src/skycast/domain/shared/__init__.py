"""Shared domain building blocks."""

from skycast.domain.shared.app_error import (
    AppError,
    CacheError,
    ErrorKind,
    HttpError,
    NetworkError,
    NoConnection,
    ParseError,
    Timeout,
    UnknownError,
    is_network_error,
)
from skycast.domain.shared.exceptions import (
    CacheDeserializationError,
    DomainException,
    ErrorCode,
    ValidationError,
)
from skycast.domain.shared.result_state import (
    Failure,
    Loading,
    ResultState,
    Success,
    data_or_none,
    error_or_none,
    is_failure,
    is_loading,
    is_success,
    is_terminal,
    map_error,
    map_state,
)

__all__ = [
    # Errors
    "AppError",
    "CacheError",
    "ErrorKind",
    "HttpError",
    "NetworkError",
    "NoConnection",
    "ParseError",
    "Timeout",
    "UnknownError",
    "is_network_error",
    # Exceptions
    "CacheDeserializationError",
    "DomainException",
    "ErrorCode",
    "ValidationError",
    # Result envelope
    "Failure",
    "Loading",
    "ResultState",
    "Success",
    "data_or_none",
    "error_or_none",
    "is_failure",
    "is_loading",
    "is_success",
    "is_terminal",
    "map_error",
    "map_state",
]
