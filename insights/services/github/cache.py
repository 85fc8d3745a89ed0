"""
TTL caching for GitHub aggregates.

Provides an in-memory cache with a time-to-live per entry. Each aggregate
stores its result with its own TTL, tuned to how quickly the data changes:
- Repository data: 60 minutes
- User activity: 30 minutes
- Contribution calendar: 2 hours
- User stats: 60 minutes

Expired entries are evicted lazily when they are read; there is no
background sweeper. Capacity is bounded with an LRU policy so a long-lived
process cannot grow the cache without limit.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from cachetools import LRUCache  # type: ignore[import-untyped]

from insights.services.github.types import CacheStats

logger = logging.getLogger(__name__)

# Signature of the decorated aggregate
P = ParamSpec("P")
T = TypeVar("T")

DEFAULT_MAX_ENTRIES = 1000
KEY_SEPARATOR = ":"


@dataclass(frozen=True)
class CacheEntry:
    data: Any
    timestamp: float
    ttl: float  # seconds

    def is_expired(self, now: float) -> bool:
        return now - self.timestamp >= self.ttl


def make_cache_key(prefix: str, *params: Any) -> str:
    """
    Build a cache key from a prefix and every discriminating parameter.

    Usage:
        key = make_cache_key("repo", "octo/demo")  # "repo:octo/demo"
    """
    return KEY_SEPARATOR.join([prefix, *(str(p) for p in params)])


class ResponseCache:
    """In-memory cache with per-entry TTL and lazy expiry."""

    def __init__(
        self,
        maxsize: int = DEFAULT_MAX_ENTRIES,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: LRUCache[str, CacheEntry] = LRUCache(maxsize=maxsize)
        self._timer = timer

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._timer()):
            del self._entries[key]
            logger.debug(f"Cache EXPIRED: {key}")
            return None

        return entry.data

    def set(self, key: str, value: Any, ttl_minutes: float = 60) -> None:
        self._entries[key] = CacheEntry(data=value, timestamp=self._timer(), ttl=ttl_minutes * 60)

    def clear(self) -> None:
        """Drop every entry. Useful for testing or when data is known to be stale."""
        self._entries.clear()
        logger.debug("Cleared GitHub response cache")

    def stats(self) -> CacheStats:
        """Get current cache statistics for monitoring."""
        return CacheStats(
            size=len(self._entries),
            keys=list(self._entries.keys()),
            maxsize=self._entries.maxsize,
        )


def cached_aggregate(
    prefix: str,
    ttl_minutes: float,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for caching async aggregate methods in the instance's cache.

    Usage:
        @cached_aggregate("repo", ttl_minutes=60)
        async def _fetch_repo_data(self, repo_full_name: str) -> RepoData:
            ...

    The decorated method's instance must expose a ResponseCache as `cache`.
    The cache key is the prefix joined with the arguments (excluding 'self').
    On cache hit, returns immediately without making an API call. On cache
    miss, executes the method and stores the result; if the method raises,
    nothing is stored.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            owner, params = args[0], args[1:]
            cache: ResponseCache = owner.cache  # type: ignore[attr-defined]
            key = make_cache_key(prefix, *params, *kwargs.values())

            cached: T | None = cache.get(key)
            if cached is not None:
                logger.debug(f"Cache HIT: {key}")
                return cached

            logger.debug(f"Cache MISS: {key}")
            result = await func(*args, **kwargs)
            cache.set(key, result, ttl_minutes)
            return result

        return wrapper

    return decorator
