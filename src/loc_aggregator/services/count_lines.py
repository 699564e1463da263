"""Count-lines use case: the request pipeline behind both language routes.

Depends only on the :class:`RepoLister` port and the pure service modules.
The interface layer injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging

from loc_aggregator.domain.entities import LanguageCounts
from loc_aggregator.domain.ports.repo_lister import RepoLister
from loc_aggregator.services.aggregator import LanguageAggregator
from loc_aggregator.services.rate_limit_guard import RateLimitGuard

logger = logging.getLogger(__name__)


class CountLinesUseCase:
    """Budget check → repository listing → aggregation."""

    def __init__(
        self,
        repo_lister: RepoLister,
        aggregator: LanguageAggregator,
    ) -> None:
        self._lister = repo_lister
        self._aggregator = aggregator
        self._guard = RateLimitGuard(repo_lister)

    async def execute(
        self, username: str, repo_name: str | None = None
    ) -> LanguageCounts:
        """Return language totals for *username*, or for one of their repositories."""
        status = await self._guard.check_budget()
        logger.debug("GitHub budget: %d/%d remaining", status.remaining, status.limit)

        repos = await self._lister.list_repositories(username)
        logger.info("Listed %d repositories for %s", len(repos), username)

        if repo_name:
            return await self._aggregator.resolve_one(repos, repo_name)
        return await self._aggregator.aggregate(repos)
