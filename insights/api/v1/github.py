"""
GitHub aggregate endpoints.

Serves repository data, user activity, contribution calendars and profile
statistics as JSON for the dashboard front-end, plus rate limit and cache
introspection.
"""

import logging
import time
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from insights.api.deps import get_github_service
from insights.services.github import (
    GitHubAggregateError,
    GitHubAPIError,
    GitHubService,
)

router = APIRouter(prefix="/github", tags=["github"])
logger = logging.getLogger(__name__)


# --- Response Models ---


class RateLimitResponse(BaseModel):
    """Last known GitHub quota."""

    remaining: int
    reset: int  # epoch milliseconds
    limit: int


class CacheStatsResponse(BaseModel):
    """Current contents of the response cache."""

    size: int
    keys: list[str]
    maxsize: int


# --- Helper Functions ---


def to_http_exception(error: GitHubAggregateError) -> HTTPException:
    """Map a failed aggregate to the status GitHub returned (502 if none)."""
    detail = str(error)
    cause = error.cause
    if isinstance(cause, GitHubAPIError) and cause.rate_limit_reset:
        reset_in = max(0, cause.rate_limit_reset - int(time.time()))
        minutes = reset_in // 60
        detail = f"{detail}. Rate limit resets in {minutes} minutes."

    return HTTPException(
        status_code=error.status_code or status.HTTP_502_BAD_GATEWAY,
        detail=detail,
    )


# --- Endpoints ---


@router.get("/repos/{owner}/{repo}")
async def get_repo_data(
    owner: str,
    repo: str,
    github: GitHubService = Depends(get_github_service),
) -> dict[str, Any]:
    """
    Repository metadata, recent commits, contributors, languages and releases.

    Includes a `language_breakdown` with each language's share of the code.
    """
    try:
        data = await github.get_repo_data(f"{owner}/{repo}")
    except GitHubAggregateError as e:
        raise to_http_exception(e) from None

    result = asdict(data)
    result["language_breakdown"] = [asdict(stat) for stat in data.language_breakdown()]
    return result


@router.get("/users/{username}/activity")
async def get_user_activity(
    username: str,
    github: GitHubService = Depends(get_github_service),
) -> dict[str, Any]:
    """Recent commits, pull requests, issues, starred repos and activity feed."""
    try:
        activity = await github.get_user_activity(username)
    except GitHubAggregateError as e:
        raise to_http_exception(e) from None

    return asdict(activity)


@router.get("/users/{username}/contributions")
async def get_contribution_data(
    username: str,
    github: GitHubService = Depends(get_github_service),
) -> dict[str, Any]:
    """Trailing-year contribution calendar with streaks."""
    try:
        contributions = await github.get_contribution_data(username)
    except GitHubAggregateError as e:
        raise to_http_exception(e) from None

    return asdict(contributions)


@router.get("/users/{username}/stats")
async def get_github_stats(
    username: str,
    github: GitHubService = Depends(get_github_service),
) -> dict[str, Any]:
    """Stars, forks, language histogram and top/recent repositories."""
    try:
        stats = await github.get_github_stats(username)
    except GitHubAggregateError as e:
        raise to_http_exception(e) from None

    return asdict(stats)


@router.get("/rate-limit", response_model=RateLimitResponse)
async def get_rate_limit(
    github: GitHubService = Depends(get_github_service),
) -> RateLimitResponse:
    """Quota as reported by the last GitHub response."""
    return RateLimitResponse(**asdict(github.get_rate_limit_info()))


@router.get("/cache", response_model=CacheStatsResponse)
async def get_cache_stats(
    github: GitHubService = Depends(get_github_service),
) -> CacheStatsResponse:
    return CacheStatsResponse(**asdict(github.get_cache_stats()))


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cache(
    github: GitHubService = Depends(get_github_service),
) -> None:
    """Drop all cached aggregates so the next calls refetch from GitHub."""
    github.clear_cache()
    logger.info("GitHub response cache cleared via API")
