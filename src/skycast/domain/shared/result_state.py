"""Result envelope describing the lifecycle of one asynchronous query.

A query stream always starts with exactly one ``Loading`` (optionally
carrying the last cached value) and ends with exactly one terminal
envelope, ``Success`` or ``Failure``. Nothing follows the terminal one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from skycast.domain.shared.app_error import AppError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Loading(Generic[T]):
    """Operation in progress; ``data`` is the cached value if one exists."""

    data: T | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed with an authoritative value."""

    data: T


@dataclass(frozen=True)
class Failure:
    """Operation failed and no value is available."""

    error: AppError


ResultState = Union[Loading[T], Success[T], Failure]


def is_loading(state: ResultState) -> bool:
    return isinstance(state, Loading)


def is_success(state: ResultState) -> bool:
    return isinstance(state, Success)


def is_failure(state: ResultState) -> bool:
    return isinstance(state, Failure)


def is_terminal(state: ResultState) -> bool:
    """Return True for the envelopes that end a query stream."""
    return isinstance(state, (Success, Failure))


def data_or_none(state: ResultState[T]) -> T | None:
    """Return the payload of Loading/Success, None for Failure."""
    if isinstance(state, (Loading, Success)):
        return state.data
    return None


def error_or_none(state: ResultState) -> AppError | None:
    if isinstance(state, Failure):
        return state.error
    return None


def map_state(state: ResultState[T], transform: Callable[[T], R]) -> ResultState[R]:
    """Transform the payload while keeping the envelope type."""
    if isinstance(state, Loading):
        return Loading(None if state.data is None else transform(state.data))
    if isinstance(state, Success):
        return Success(transform(state.data))
    return state


def map_error(
    state: ResultState[T],
    transform: Callable[[AppError], AppError],
) -> ResultState[T]:
    if isinstance(state, Failure):
        return Failure(transform(state.error))
    return state
