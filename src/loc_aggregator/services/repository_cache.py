"""Repository cache: last known revision and language counts per repository.

Entries are never evicted.  Every update rewrites the whole mapping through
the injected :class:`CacheStore` before returning to the caller.
"""

from __future__ import annotations

import logging
from typing import Mapping

from loc_aggregator.domain.entities import CacheEntry, LanguageCounts
from loc_aggregator.domain.exceptions import PersistenceError
from loc_aggregator.domain.ports.cache_store import CacheStore

logger = logging.getLogger(__name__)


class RepositoryCache:
    """In-memory cache keyed by fully-qualified repository name."""

    def __init__(
        self,
        store: CacheStore,
        entries: Mapping[str, CacheEntry] | None = None,
    ) -> None:
        self._store = store
        self._entries: dict[str, CacheEntry] = dict(entries or {})

    @classmethod
    def from_store(cls, store: CacheStore) -> RepositoryCache:
        """Build a cache pre-populated with whatever *store* holds."""
        entries = store.load()
        logger.info("Loaded %d cached repositories", len(entries))
        return cls(store, entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._entries

    def get(self, full_name: str) -> CacheEntry | None:
        return self._entries.get(full_name)

    @staticmethod
    def is_valid(entry: CacheEntry | None, revision_marker: str | None) -> bool:
        """True iff *entry* exists and was computed at *revision_marker*."""
        return entry is not None and entry.is_current(revision_marker)

    def put(
        self,
        full_name: str,
        revision_marker: str | None,
        languages: LanguageCounts,
    ) -> CacheEntry:
        """Overwrite the entry for *full_name* and persist the whole cache.

        A persistence failure is logged; the in-memory entry is kept.
        """
        entry = CacheEntry(latest_commit=revision_marker, languages=dict(languages))
        self._entries[full_name] = entry
        try:
            self._store.save(self._entries)
        except PersistenceError as exc:
            logger.error("Error saving cache file: %s", exc)
        return entry
