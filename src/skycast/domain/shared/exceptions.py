"""Shared domain exceptions and error codes.

All domain exceptions inherit from DomainException so the presentation
layer can render them uniformly.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    CACHE_DESERIALIZATION_FAILED = "CACHE_DESERIALIZATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not shown to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class CacheDeserializationError(DomainException):
    """Raised when a cached record cannot be decoded back into a domain value."""

    def __init__(self, message: str, key: str | None = None):
        details = {"key": key} if key is not None else {}
        super().__init__(message, ErrorCode.CACHE_DESERIALIZATION_FAILED, details)
