"""Port: durable storage for the repository cache."""

from __future__ import annotations

from typing import Mapping, Protocol

from loc_aggregator.domain.entities import CacheEntry


class CacheStore(Protocol):
    """Loads and rewrites the full cache mapping."""

    def load(self) -> dict[str, CacheEntry]:
        ...

    def save(self, entries: Mapping[str, CacheEntry]) -> None:
        """Persist *entries*, raising ``PersistenceError`` on failure."""
        ...
