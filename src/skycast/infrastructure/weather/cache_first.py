"""Cache-first query protocol shared by the weather repositories.

One invocation produces a lazy stream of exactly two envelopes:

1. ``Loading`` carrying the cached value (or None), emitted before any
   network activity starts.
2. One terminal envelope produced by a refresh task launched on the
   repository's ``BackgroundScope``:

   * remote success -> value persisted to the cache, then ``Success(fresh)``
   * remote failure with a cached value -> ``Success(cached)`` (masked)
   * remote failure without a cached value -> ``Failure(classified error)``

The refresh task's result is the one-shot channel back into the stream. The
stream awaits it through ``asyncio.shield`` so a consumer that stops
listening never cancels the fetch or a cache write already underway. No
retries happen here; re-invoking the query is the caller's job.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from typing import AsyncIterator, Awaitable, Callable, TypeVar

from skycast.domain.shared.result_state import (
    Failure,
    Loading,
    ResultState,
    Success,
)
from skycast.infrastructure.error_mapper import to_app_error

from .background import BackgroundScope

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class CacheWriteError(Exception):
    """Wraps a failure to persist a freshly fetched value."""


async def first_or_none(stream: AsyncIterator[R]) -> R | None:
    """Take one snapshot of a reactive read, then stop listening."""
    async with aclosing(stream) as items:  # type: ignore[type-var]
        async for item in items:
            return item
    return None


async def persist(write: Awaitable[None]) -> None:
    """Run a cache write, tagging its failure so it is told apart from fetch errors."""
    try:
        await write
    except Exception as e:
        raise CacheWriteError(str(e) or type(e).__name__) from e


async def _read_cache_safely(
    key: str,
    read_cached: Callable[[], Awaitable[T | None]],
) -> T | None:
    try:
        return await read_cached()
    except Exception as e:
        logger.warning(
            "Ignoring unreadable cache for %r (%s): %s",
            key,
            type(e).__name__,
            e,
        )
        return None


async def _refresh(
    key: str,
    cached: T | None,
    fetch_and_store: Callable[[], Awaitable[T]],
) -> ResultState[T]:
    try:
        fresh = await fetch_and_store()
    except CacheWriteError as e:
        logger.error("Cache write failed for %r after a successful fetch", key, exc_info=e)
        error = to_app_error(e.__cause__ or e)
    except Exception as e:
        error = to_app_error(e)
    else:
        return Success(fresh)

    if cached is not None:
        logger.info("Refresh of %r failed (%s), serving cached value", key, error.kind.value)
        return Success(cached)
    logger.info("Refresh of %r failed with %s and nothing is cached", key, error.kind.value)
    return Failure(error)


async def cache_first(
    key: str,
    read_cached: Callable[[], Awaitable[T | None]],
    fetch_and_store: Callable[[], Awaitable[T]],
    scope: BackgroundScope,
) -> AsyncIterator[ResultState[T]]:
    """Serve ``key`` from cache immediately and refresh it in the background.

    Parameters
    ----------
    key
        Query key, used for logging only
    read_cached
        Returns the cached domain value, or None when nothing (or an empty
        result set) is cached. Failures are treated as "nothing cached".
    fetch_and_store
        Fetches from the remote source, persists the result and returns the
        fresh domain value. Runs on ``scope``, detached from this stream.
    scope
        Repository-owned scope that keeps the refresh alive
    """
    cached = await _read_cache_safely(key, read_cached)

    yield Loading(cached)

    refresh = scope.launch(_refresh(key, cached, fetch_and_store))
    yield await asyncio.shield(refresh)
