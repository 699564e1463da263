"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class LocAggregatorError(Exception):
    """Base exception for the entire application."""


# ── Request budget ──────────────────────────────────────────────────────────


class BudgetExhaustedError(LocAggregatorError):
    """The GitHub rate-limit budget has no calls left."""


# ── Upstream errors ─────────────────────────────────────────────────────────


class UpstreamError(LocAggregatorError):
    """Transport, authentication or malformed-response error from GitHub or the line counter."""


class RepositoryNotFoundError(LocAggregatorError):
    """The requested repository is not among the user's repositories."""


# ── Persistence ─────────────────────────────────────────────────────────────


class PersistenceError(LocAggregatorError):
    """Writing the cache document to disk failed."""
