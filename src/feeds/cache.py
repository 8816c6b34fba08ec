"""Time-bounded cache with an ordered fallback chain of sources."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 300


@dataclass
class CacheEntry(Generic[T]):
    value: T
    fetched_at: float


@dataclass
class Source(Generic[T]):
    """A named upstream fetch function."""

    name: str
    fetch: Callable[[], T]


class CacheOrFallback(Generic[T]):
    """Serve the last good value for ``ttl_seconds``, then refresh.

    A refresh tries each source once, in order. The first success becomes
    the cached entry. If every source fails, the previous entry is served
    as-is (its age is not reset) or, with no previous entry, the static
    fallback. ``get()`` never raises.

    There is no locking: concurrent callers past the TTL each refresh, and
    the last one to finish wins.
    """

    def __init__(
        self,
        name: str,
        sources: Sequence[Source[T]],
        fallback: T,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if not sources:
            raise ValueError("at least one source is required")
        self.name = name
        self.sources = list(sources)
        self.fallback = fallback
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.entry: Optional[CacheEntry[T]] = None
        self.refresh_count = 0

    def is_fresh(self) -> bool:
        return self.entry is not None and self.clock() - self.entry.fetched_at < self.ttl_seconds

    def get(self) -> T:
        if self.is_fresh():
            return self.entry.value
        return self.refresh()

    def refresh(self) -> T:
        self.refresh_count += 1
        for source in self.sources:
            try:
                value = source.fetch()
            except Exception as e:
                logger.warning("%s: source %s failed: %s", self.name, source.name, e)
                continue
            self.entry = CacheEntry(value=value, fetched_at=self.clock())
            logger.info("%s: refreshed from %s", self.name, source.name)
            return value

        if self.entry is not None:
            logger.error("%s: all sources failed, serving last good value", self.name)
            return self.entry.value
        logger.error("%s: all sources failed, serving fallback", self.name)
        return self.fallback

    def clear(self) -> None:
        self.entry = None
