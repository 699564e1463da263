"""Per-repository resolver: cached or freshly counted language totals."""

from __future__ import annotations

import logging

from loc_aggregator.domain.entities import ExclusionRules, LanguageCounts, RepositoryRef
from loc_aggregator.domain.ports.line_counter import LineCounter
from loc_aggregator.services.exclusion_filter import tally_languages
from loc_aggregator.services.repository_cache import RepositoryCache

logger = logging.getLogger(__name__)


class LanguageResolver:
    """Return the language counts of one repository.

    Parameters
    ----------
    cache:
        Shared repository cache, consulted first and updated on a miss.
    line_counter:
        Adapter that counts lines in a remote repository.
    rules:
        Exclusion rules; ignored paths are sent upstream and excluded
        languages are dropped before caching.
    """

    def __init__(
        self,
        cache: RepositoryCache,
        line_counter: LineCounter,
        rules: ExclusionRules,
    ) -> None:
        self._cache = cache
        self._counter = line_counter
        self._rules = rules

    async def resolve(self, repo: RepositoryRef) -> LanguageCounts:
        entry = self._cache.get(repo.full_name)
        if self._cache.is_valid(entry, repo.pushed_at):
            assert entry is not None
            logger.debug("Cache hit for %s at %s", repo.full_name, repo.pushed_at)
            return dict(entry.languages)

        logger.debug("Cache miss for %s, counting lines", repo.full_name)
        # Errors from the counter propagate; nothing is cached on failure.
        records = await self._counter.count_lines(
            repo.full_name, self._rules.paths
        )
        languages = tally_languages(records, self._rules)

        self._cache.put(repo.full_name, repo.pushed_at, languages)
        logger.info(
            "Counted %d language(s) for %s", len(languages), repo.full_name
        )
        return languages
