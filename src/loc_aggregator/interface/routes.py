"""API routes: thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from loc_aggregator.interface.dependencies import get_use_case
from loc_aggregator.interface.schemas import ErrorResponse, LanguageCountsResponse
from loc_aggregator.services.count_lines import CountLinesUseCase

router = APIRouter()

_ERROR_RESPONSES = {
    429: {"model": ErrorResponse, "description": "GitHub API rate limit exhausted"},
    500: {"model": ErrorResponse, "description": "Upstream failure or unknown repository"},
}


@router.get(
    "/languages/{username}",
    response_model=LanguageCountsResponse,
    responses=_ERROR_RESPONSES,
)
async def languages_for_user(
    username: str,
    use_case: CountLinesUseCase = Depends(get_use_case),
) -> LanguageCountsResponse:
    """Total lines of code per language across a user's repositories."""
    counts = await use_case.execute(username)
    return LanguageCountsResponse(counts)


@router.get(
    "/languages/{username}/{repo_name}",
    response_model=LanguageCountsResponse,
    responses=_ERROR_RESPONSES,
)
async def languages_for_repository(
    username: str,
    repo_name: str,
    use_case: CountLinesUseCase = Depends(get_use_case),
) -> LanguageCountsResponse:
    """Lines of code per language for one repository (blacklist not applied)."""
    counts = await use_case.execute(username, repo_name)
    return LanguageCountsResponse(counts)
