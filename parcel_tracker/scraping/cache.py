"""
Short-lived in-process cache of successful tracking lookups.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from parcel_tracker.domain.tracking import ShipmentRecord

Clock = Callable[[], float]

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class CacheEntry:
    identifier: str
    records: tuple[ShipmentRecord, ...]
    captured_at: float


class ResultCache:
    """
    Identifier-keyed records with a fixed time-to-live.

    Stale entries are dropped lazily on read. There is no size bound and no
    request coalescing: two concurrent misses for the same identifier both
    scrape, and the later put wins.
    """

    def __init__(
        self,
        *,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive.")
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, identifier: str) -> CacheEntry | None:
        with self._lock:
            entry = self._entries.get(identifier)
            if entry is None:
                return None
            if self._clock() - entry.captured_at < self._ttl_seconds:
                return entry
            del self._entries[identifier]
            return None

    def put(self, identifier: str, records: Sequence[ShipmentRecord]) -> CacheEntry:
        with self._lock:
            entry = CacheEntry(
                identifier=identifier,
                records=tuple(records),
                captured_at=self._clock(),
            )
            self._entries[identifier] = entry
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
