"""Tests for repository and language exclusion."""

from __future__ import annotations

from loc_aggregator.domain.entities import ExclusionRules, RepositoryRef
from loc_aggregator.services.exclusion_filter import (
    filter_repositories,
    should_skip_repository,
    tally_languages,
)
from tests._fixtures.fakes import rows

RULES = ExclusionRules(
    repos=frozenset({"dotfiles"}),
    paths=("vendor", "node_modules"),
    languages=frozenset({"JSON", "Markdown"}),
)


def test_should_skip_repository_matches_short_name_only() -> None:
    assert should_skip_repository(RepositoryRef("dotfiles", "demo/dotfiles"), RULES)
    assert not should_skip_repository(RepositoryRef("app", "dotfiles/app"), RULES)


def test_filter_repositories_keeps_order() -> None:
    repos = [
        RepositoryRef("b", "demo/b"),
        RepositoryRef("dotfiles", "demo/dotfiles"),
        RepositoryRef("a", "demo/a"),
    ]
    assert [r.name for r in filter_repositories(repos, RULES)] == ["b", "a"]


def test_tally_sums_repeated_languages_and_drops_excluded() -> None:
    records = rows(Python=10, JSON=400) + rows(Python=5, Markdown=3, Go=7)

    assert tally_languages(records, RULES) == {"Python": 15, "Go": 7}


def test_tally_of_nothing_is_empty() -> None:
    assert tally_languages([], RULES) == {}
