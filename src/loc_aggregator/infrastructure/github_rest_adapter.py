"""GitHub REST API adapter: implements the RepoLister port."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from loc_aggregator.domain.entities import RateLimitStatus, RepositoryRef
from loc_aggregator.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_PER_PAGE = "100"


class _RepoItem(BaseModel):
    name: str
    full_name: str
    pushed_at: str | None = None


class _RateResource(BaseModel):
    limit: int
    remaining: int
    reset: int | None = None


class _RateLimitBody(BaseModel):
    rate: _RateResource


class GitHubRestAdapter:
    """Concrete RepoLister backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        auth: tuple[str, str] | None = None,
        base_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._auth = auth
        self._base_url = base_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "loc-aggregator/1.0",
        }

    async def fetch_rate_limit(self) -> RateLimitStatus:
        """GET /rate_limit → RateLimitStatus."""
        data = await self._api_get("/rate_limit")
        try:
            body = _RateLimitBody.model_validate(data)
        except ValidationError as exc:
            raise UpstreamError(f"Malformed rate limit response: {exc}") from exc
        return RateLimitStatus(
            limit=body.rate.limit,
            remaining=body.rate.remaining,
            reset=body.rate.reset,
        )

    async def list_repositories(self, username: str) -> list[RepositoryRef]:
        """GET /users/{username}/repos?per_page=100 → [RepositoryRef]."""
        data = await self._api_get(
            f"/users/{username}/repos", params={"per_page": _PER_PAGE}
        )
        if not isinstance(data, list):
            raise UpstreamError(f"Malformed repository listing for {username}")
        try:
            items = [_RepoItem.model_validate(item) for item in data]
        except ValidationError as exc:
            raise UpstreamError(f"Malformed repository listing for {username}: {exc}") from exc
        return [
            RepositoryRef(name=item.name, full_name=item.full_name, pushed_at=item.pushed_at)
            for item in items
        ]

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Perform an authenticated GitHub API GET and return the decoded JSON."""
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params, auth=self._auth
            )
        except httpx.HTTPError as exc:
            logger.error("Error fetching %s: %s", url, exc)
            raise UpstreamError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code != 200:
            logger.error("GitHub API returned HTTP %d for %s", resp.status_code, url)
            raise UpstreamError(
                f"GitHub API returned HTTP {resp.status_code} for {url}"
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(f"GitHub API returned invalid JSON for {url}") from exc
