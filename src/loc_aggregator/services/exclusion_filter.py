"""Exclusion filtering: decide which repositories and languages are counted."""

from __future__ import annotations

from typing import Iterable, Sequence

from loc_aggregator.domain.entities import (
    ExclusionRules,
    LanguageCounts,
    LineCountRecord,
    RepositoryRef,
)


def should_skip_repository(repo: RepositoryRef, rules: ExclusionRules) -> bool:
    """Return *True* if the repository's short name is blacklisted."""
    return repo.name in rules.repos


def is_language_excluded(language: str, rules: ExclusionRules) -> bool:
    return language in rules.languages


def filter_repositories(
    repos: Sequence[RepositoryRef], rules: ExclusionRules
) -> list[RepositoryRef]:
    """Drop blacklisted repositories, keeping input order."""
    return [repo for repo in repos if not should_skip_repository(repo, rules)]


def tally_languages(
    records: Iterable[LineCountRecord], rules: ExclusionRules
) -> LanguageCounts:
    """Sum line counts per language, leaving out excluded languages.

    A language may appear in several records; its counts are added up.
    """
    counts: LanguageCounts = {}
    for record in records:
        if is_language_excluded(record.language, rules):
            continue
        counts[record.language] = counts.get(record.language, 0) + record.lines_of_code
    return counts
