"""Tests for the count-lines use case and its rate-limit guard."""

from __future__ import annotations

import asyncio

import pytest

from loc_aggregator.domain.entities import ExclusionRules, RepositoryRef
from loc_aggregator.domain.exceptions import BudgetExhaustedError
from loc_aggregator.services.aggregator import LanguageAggregator
from loc_aggregator.services.count_lines import CountLinesUseCase
from loc_aggregator.services.language_resolver import LanguageResolver
from loc_aggregator.services.rate_limit_guard import RateLimitGuard
from loc_aggregator.services.repository_cache import RepositoryCache
from tests._fixtures.fakes import FakeLineCounter, FakeRepoLister, rows

REPOS = [
    RepositoryRef("app", "demo/app", "m1"),
    RepositoryRef("lib", "demo/lib", "m1"),
]


def _use_case(
    lister: FakeRepoLister, cache: RepositoryCache, counter: FakeLineCounter
) -> CountLinesUseCase:
    rules = ExclusionRules(repos=frozenset({"lib"}))
    resolver = LanguageResolver(cache, counter, rules)
    return CountLinesUseCase(lister, LanguageAggregator(resolver, rules))


def test_exhausted_budget_stops_before_listing(
    cache: RepositoryCache, counter: FakeLineCounter
) -> None:
    lister = FakeRepoLister(REPOS, remaining=0)

    with pytest.raises(BudgetExhaustedError, match="Rate limit exceeded"):
        asyncio.run(_use_case(lister, cache, counter).execute("demo"))

    assert lister.rate_limit_calls == 1
    assert lister.listed == []
    assert counter.calls == []


def test_guard_returns_status_when_budget_left() -> None:
    lister = FakeRepoLister(remaining=1)
    status = asyncio.run(RateLimitGuard(lister).check_budget())
    assert status.remaining == 1


def test_execute_aggregates_all_repositories(
    cache: RepositoryCache, counter: FakeLineCounter
) -> None:
    counter.responses = {"demo/app": rows(Python=12), "demo/lib": rows(Python=8)}
    lister = FakeRepoLister(REPOS)

    assert asyncio.run(_use_case(lister, cache, counter).execute("demo")) == {"Python": 12}
    assert lister.listed == ["demo"]


def test_execute_with_repo_name_bypasses_blacklist(
    cache: RepositoryCache, counter: FakeLineCounter
) -> None:
    counter.responses = {"demo/lib": rows(C=3)}
    lister = FakeRepoLister(REPOS)

    assert asyncio.run(_use_case(lister, cache, counter).execute("demo", "lib")) == {"C": 3}
