from __future__ import annotations

import pytest

from loc_aggregator.domain.entities import ExclusionRules
from loc_aggregator.services.repository_cache import RepositoryCache
from tests._fixtures.fakes import FakeLineCounter, MemoryCacheStore


@pytest.fixture
def store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def cache(store: MemoryCacheStore) -> RepositoryCache:
    return RepositoryCache(store)


@pytest.fixture
def counter() -> FakeLineCounter:
    return FakeLineCounter()


@pytest.fixture
def rules() -> ExclusionRules:
    return ExclusionRules()
