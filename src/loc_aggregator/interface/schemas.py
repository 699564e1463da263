"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, RootModel


class LanguageCountsResponse(RootModel[dict[str, int]]):
    """``{"<language>": <lines>, ...}`` returned by both language routes."""


class ErrorResponse(BaseModel):
    """Error envelope returned on all failure paths."""

    error: str
