"""Rate-limit guard: refuse work once the GitHub budget is spent."""

from __future__ import annotations

import logging

from loc_aggregator.domain.entities import RateLimitStatus
from loc_aggregator.domain.exceptions import BudgetExhaustedError
from loc_aggregator.domain.ports.repo_lister import RepoLister

logger = logging.getLogger(__name__)

BUDGET_EXHAUSTED_MESSAGE = "Rate limit exceeded. Try again later."


class RateLimitGuard:
    def __init__(self, repo_lister: RepoLister) -> None:
        self._lister = repo_lister

    async def check_budget(self) -> RateLimitStatus:
        """Return the current budget, raising if no calls remain."""
        status = await self._lister.fetch_rate_limit()
        if status.exhausted:
            logger.warning(
                "GitHub rate limit exhausted (limit=%d, reset=%s)",
                status.limit,
                status.reset,
            )
            raise BudgetExhaustedError(BUDGET_EXHAUSTED_MESSAGE)
        return status
