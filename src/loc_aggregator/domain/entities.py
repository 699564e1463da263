"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field

LanguageCounts = dict[str, int]
"""Language name → non-negative line count."""


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    """One repository as reported by the GitHub listing API."""

    name: str
    full_name: str
    pushed_at: str | None = None  # opaque revision marker, compared for equality only


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Language counts computed for a repository at a given revision."""

    latest_commit: str | None
    languages: LanguageCounts = field(default_factory=dict)

    def is_current(self, revision_marker: str | None) -> bool:
        return self.latest_commit == revision_marker


@dataclass(frozen=True, slots=True)
class ExclusionRules:
    """Repositories, path substrings and languages left out of the counts."""

    repos: frozenset[str] = frozenset()
    paths: tuple[str, ...] = ()
    languages: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class LineCountRecord:
    """A single row returned by the line-counting API."""

    language: str
    lines_of_code: int


@dataclass(frozen=True, slots=True)
class RateLimitStatus:
    """Core rate-limit budget of the authenticated GitHub identity."""

    limit: int
    remaining: int
    reset: int | None = None

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0
