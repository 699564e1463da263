"""Tests for cross-repository aggregation."""

from __future__ import annotations

import asyncio

import pytest

from loc_aggregator.domain.entities import ExclusionRules, RepositoryRef
from loc_aggregator.domain.exceptions import RepositoryNotFoundError
from loc_aggregator.services.aggregator import LanguageAggregator, merge_counts
from loc_aggregator.services.language_resolver import LanguageResolver
from loc_aggregator.services.repository_cache import RepositoryCache
from tests._fixtures.fakes import FakeLineCounter, rows

APP = RepositoryRef("app", "demo/app", "m1")
LIB = RepositoryRef("lib", "demo/lib", "m1")
DOTFILES = RepositoryRef("dotfiles", "demo/dotfiles", "m1")


def _aggregator(
    cache: RepositoryCache, counter: FakeLineCounter, rules: ExclusionRules
) -> LanguageAggregator:
    return LanguageAggregator(LanguageResolver(cache, counter, rules), rules)


def test_aggregate_of_no_repositories_is_empty(
    cache: RepositoryCache, counter: FakeLineCounter, rules: ExclusionRules
) -> None:
    assert asyncio.run(_aggregator(cache, counter, rules).aggregate([])) == {}
    assert counter.calls == []


def test_disjoint_languages_are_unioned(
    cache: RepositoryCache, counter: FakeLineCounter, rules: ExclusionRules
) -> None:
    counter.responses = {"demo/app": rows(JS=100), "demo/lib": rows(Go=30)}

    result = asyncio.run(_aggregator(cache, counter, rules).aggregate([APP, LIB]))

    assert result == {"JS": 100, "Go": 30}


def test_shared_languages_are_summed(
    cache: RepositoryCache, counter: FakeLineCounter, rules: ExclusionRules
) -> None:
    counter.responses = {"demo/app": rows(JS=100, CSS=4), "demo/lib": rows(JS=30)}

    result = asyncio.run(_aggregator(cache, counter, rules).aggregate([LIB, APP]))

    assert result == {"JS": 130, "CSS": 4}


def test_blacklisted_repository_is_skipped_but_still_resolvable(
    cache: RepositoryCache, counter: FakeLineCounter
) -> None:
    rules = ExclusionRules(repos=frozenset({"dotfiles"}))
    counter.responses = {"demo/app": rows(JS=1), "demo/dotfiles": rows(Shell=80)}
    aggregator = _aggregator(cache, counter, rules)

    total = asyncio.run(aggregator.aggregate([APP, DOTFILES]))
    assert total == {"JS": 1}
    assert [name for name, _ in counter.calls] == ["demo/app"]

    single = asyncio.run(aggregator.resolve_one([APP, DOTFILES], "dotfiles"))
    assert single == {"Shell": 80}


def test_resolve_one_unknown_repository(
    cache: RepositoryCache, counter: FakeLineCounter, rules: ExclusionRules
) -> None:
    with pytest.raises(RepositoryNotFoundError, match="Repository nope not found"):
        asyncio.run(_aggregator(cache, counter, rules).resolve_one([APP], "nope"))
    assert counter.calls == []


def test_merge_counts_adds_in_place() -> None:
    total = {"JS": 1}
    assert merge_counts(total, {"JS": 2, "Go": 3}) is total
    assert total == {"JS": 3, "Go": 3}
