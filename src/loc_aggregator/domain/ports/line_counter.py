"""Port: line counter, defined by the domain and implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol, Sequence

from loc_aggregator.domain.entities import LineCountRecord


class LineCounter(Protocol):
    """Abstract contract for counting lines of code in a remote repository."""

    async def count_lines(
        self, full_name: str, ignored_paths: Sequence[str]
    ) -> list[LineCountRecord]:
        """Return per-language line counts, skipping paths matching *ignored_paths*."""
        ...
