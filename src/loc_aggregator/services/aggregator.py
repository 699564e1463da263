"""Aggregation of language counts across a user's repositories."""

from __future__ import annotations

import logging
from typing import Sequence

from loc_aggregator.domain.entities import ExclusionRules, LanguageCounts, RepositoryRef
from loc_aggregator.domain.exceptions import RepositoryNotFoundError
from loc_aggregator.services.exclusion_filter import filter_repositories
from loc_aggregator.services.language_resolver import LanguageResolver

logger = logging.getLogger(__name__)


def merge_counts(total: LanguageCounts, counts: LanguageCounts) -> LanguageCounts:
    """Add *counts* into *total* in place and return it."""
    for language, lines in counts.items():
        total[language] = total.get(language, 0) + lines
    return total


class LanguageAggregator:
    """Sums per-repository language counts into per-user totals."""

    def __init__(self, resolver: LanguageResolver, rules: ExclusionRules) -> None:
        self._resolver = resolver
        self._rules = rules

    async def aggregate(self, repos: Sequence[RepositoryRef]) -> LanguageCounts:
        """Visit every non-blacklisted repository once, sequentially."""
        kept = filter_repositories(repos, self._rules)
        if len(kept) != len(repos):
            logger.debug("Skipping %d blacklisted repositories", len(repos) - len(kept))

        total: LanguageCounts = {}
        for repo in kept:
            merge_counts(total, await self._resolver.resolve(repo))
        return total

    async def resolve_one(
        self, repos: Sequence[RepositoryRef], repo_name: str
    ) -> LanguageCounts:
        """Counts for the repository named *repo_name*.

        The repository blacklist is not consulted: an explicitly requested
        repository is always resolved.
        """
        for repo in repos:
            if repo.name == repo_name:
                return await self._resolver.resolve(repo)
        raise RepositoryNotFoundError(f"Repository {repo_name} not found")
