"""Codetabs LOC API adapter: implements the LineCounter port."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx
from pydantic import BaseModel, Field, NonNegativeInt, TypeAdapter, ValidationError

from loc_aggregator.domain.entities import LineCountRecord
from loc_aggregator.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)

_LOC_API = "https://api.codetabs.com/v1/loc"


class _LocRow(BaseModel):
    language: str
    lines_of_code: NonNegativeInt = Field(alias="linesOfCode")


_ROWS = TypeAdapter(list[_LocRow])


class CodetabsAdapter:
    """Concrete LineCounter backed by the unauthenticated codetabs API."""

    def __init__(self, client: httpx.AsyncClient, url: str = _LOC_API) -> None:
        self._client = client
        self._url = url

    async def count_lines(
        self, full_name: str, ignored_paths: Sequence[str]
    ) -> list[LineCountRecord]:
        """GET ?github={full_name}&ignored={a,b,...} → [LineCountRecord]."""
        params = {"github": full_name, "ignored": ",".join(ignored_paths)}
        try:
            resp = await self._client.get(self._url, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(
                f"Network error counting lines for {full_name}: {exc}"
            ) from exc

        if resp.status_code != 200:
            raise UpstreamError(
                f"Line counter returned HTTP {resp.status_code} for {full_name}"
            )

        try:
            rows = _ROWS.validate_json(resp.content)
        except ValidationError as exc:
            raise UpstreamError(
                f"Malformed line counter response for {full_name}: {exc}"
            ) from exc

        logger.debug("Line counter returned %d rows for %s", len(rows), full_name)
        return [LineCountRecord(language=r.language, lines_of_code=r.lines_of_code) for r in rows]
