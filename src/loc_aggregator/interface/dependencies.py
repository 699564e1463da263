"""FastAPI dependency injection wiring.

The HTTP client, repository cache and exclusion rules are process-wide:
built once in :func:`startup` and shared by every request.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import httpx

from loc_aggregator.domain.entities import ExclusionRules
from loc_aggregator.infrastructure.codetabs_adapter import CodetabsAdapter
from loc_aggregator.infrastructure.config import Settings, get_settings
from loc_aggregator.infrastructure.github_rest_adapter import GitHubRestAdapter
from loc_aggregator.infrastructure.json_store import JsonCacheStore, load_exclusion_rules
from loc_aggregator.services.aggregator import LanguageAggregator
from loc_aggregator.services.count_lines import CountLinesUseCase
from loc_aggregator.services.language_resolver import LanguageResolver
from loc_aggregator.services.repository_cache import RepositoryCache

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_repository_cache: RepositoryCache | None = None
_exclusion_rules: ExclusionRules | None = None


async def startup() -> None:
    """Initialise shared resources; called from the lifespan context manager."""
    global _http_client, _repository_cache, _exclusion_rules  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))
    _repository_cache = RepositoryCache.from_store(JsonCacheStore(settings.cache_file))
    _exclusion_rules = load_exclusion_rules(settings.blacklist_file)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _repository_cache, _exclusion_rules  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _repository_cache = None
    _exclusion_rules = None


@lru_cache(maxsize=1)
def _settings() -> Settings:
    return get_settings()


def get_use_case() -> CountLinesUseCase:
    """Build the use case around the shared cache, rules and HTTP client."""
    settings = _settings()

    assert _http_client is not None, "startup() was not called"
    assert _repository_cache is not None, "startup() was not called"
    assert _exclusion_rules is not None, "startup() was not called"

    github_adapter = GitHubRestAdapter(
        client=_http_client,
        auth=settings.github_auth,
        base_url=settings.github_api_url,
    )
    line_counter = CodetabsAdapter(client=_http_client, url=settings.line_counter_url)
    resolver = LanguageResolver(_repository_cache, line_counter, _exclusion_rules)

    return CountLinesUseCase(
        repo_lister=github_adapter,
        aggregator=LanguageAggregator(resolver, _exclusion_rules),
    )
