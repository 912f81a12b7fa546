"""Closed taxonomy of errors a weather query can end with.

Every failure raised while querying the remote source or the local cache is
classified into exactly one of these variants (see
``skycast.infrastructure.error_mapper``). Consumers branch on the concrete
type with ``isinstance`` or on the stable ``kind`` value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


class ErrorKind(str, Enum):
    """Stable identifiers for each error variant."""

    TIMEOUT = "TIMEOUT"
    NO_CONNECTION = "NO_CONNECTION"
    HTTP_ERROR = "HTTP_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    CACHE_ERROR = "CACHE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass(frozen=True)
class Timeout:
    """The request timed out."""

    kind: ClassVar[ErrorKind] = ErrorKind.TIMEOUT

    def describe(self) -> str:
        return "The request timed out"


@dataclass(frozen=True)
class NoConnection:
    """The remote host could not be reached."""

    kind: ClassVar[ErrorKind] = ErrorKind.NO_CONNECTION

    def describe(self) -> str:
        return "No internet connection"


@dataclass(frozen=True)
class HttpError:
    """The remote source answered with a non-success status code."""

    code: int
    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.HTTP_ERROR

    def describe(self) -> str:
        return f"Server error {self.code}: {self.message}"


@dataclass(frozen=True)
class ParseError:
    """A response body could not be decoded."""

    message: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    kind: ClassVar[ErrorKind] = ErrorKind.PARSE_ERROR

    def describe(self) -> str:
        return f"Could not read the server response: {self.message}"


@dataclass(frozen=True)
class CacheError:
    """The local cache could not be read or written."""

    message: str

    kind: ClassVar[ErrorKind] = ErrorKind.CACHE_ERROR

    def describe(self) -> str:
        return f"Local cache problem: {self.message}"


@dataclass(frozen=True)
class UnknownError:
    """Anything the classifier has no dedicated bucket for."""

    message: str = DEFAULT_ERROR_MESSAGE
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_ERROR

    def describe(self) -> str:
        return self.message


AppError = Union[Timeout, NoConnection, HttpError, ParseError, CacheError, UnknownError]

NetworkError = Union[Timeout, NoConnection, HttpError]


def is_network_error(error: AppError) -> bool:
    return isinstance(error, (Timeout, NoConnection, HttpError))
