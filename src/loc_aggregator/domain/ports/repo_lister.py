"""Port: repository lister, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from loc_aggregator.domain.entities import RateLimitStatus, RepositoryRef


class RepoLister(Protocol):
    """Abstract contract for listing a user's repositories on GitHub."""

    async def fetch_rate_limit(self) -> RateLimitStatus:
        """Return the remaining API budget of the configured identity."""
        ...

    async def list_repositories(self, username: str) -> list[RepositoryRef]:
        """Return up to 100 repositories owned by *username*."""
        ...
