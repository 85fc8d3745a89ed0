"""
GitHub API read operations.

One method per REST endpoint the aggregates consume:
- Repository metadata, commits, contributors, languages, releases
- User profile, repositories, public events, starred repositories

Each call goes through GitHubHTTPClient (auth headers, rate limit tracking,
error mapping) and returns normalized dataclasses. No caching happens here;
GitHubService caches whole aggregates instead.
"""

import logging
from typing import Any

from insights.services.github.constants import (
    REPO_COMMITS_PER_PAGE,
    REPO_CONTRIBUTORS_PER_PAGE,
    REPO_RELEASES_PER_PAGE,
    USER_REPOS_PER_PAGE,
)
from insights.services.github.events import GitHubEvent, parse_events
from insights.services.github.http_client import GitHubHTTPClient
from insights.services.github.normalizers import (
    normalize_commit,
    normalize_contributor,
    normalize_release,
    normalize_repo,
    normalize_user,
)
from insights.services.github.types import (
    Contributor,
    GitHubCommit,
    GitHubRelease,
    GitHubRepo,
    GitHubUser,
)

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    This class provides all methods for fetching data from GitHub without
    modifying it.
    """

    def __init__(self, http: GitHubHTTPClient):
        self.http = http

    # --- Repository endpoints ---

    async def get_repository(self, repo_full_name: str) -> GitHubRepo:
        data: dict[str, Any] = await self.http.request(f"/repos/{repo_full_name}")
        return normalize_repo(data)

    async def get_commits(
        self,
        repo_full_name: str,
        per_page: int = REPO_COMMITS_PER_PAGE,
    ) -> list[GitHubCommit]:
        data = await self.http.request(
            f"/repos/{repo_full_name}/commits",
            params={"per_page": per_page},
        )
        return [normalize_commit(c, repo_full_name) for c in data or []]

    async def get_contributors(
        self,
        repo_full_name: str,
        per_page: int = REPO_CONTRIBUTORS_PER_PAGE,
    ) -> list[Contributor]:
        """Top contributors; empty repositories answer 204 with no body."""
        data = await self.http.request(
            f"/repos/{repo_full_name}/contributors",
            params={"per_page": per_page},
        )
        return [normalize_contributor(c) for c in data or []]

    async def get_languages(self, repo_full_name: str) -> dict[str, int]:
        """Language name -> bytes of code, as GitHub reports it."""
        data: dict[str, int] | None = await self.http.request(
            f"/repos/{repo_full_name}/languages"
        )
        return dict(data or {})

    async def get_releases(
        self,
        repo_full_name: str,
        per_page: int = REPO_RELEASES_PER_PAGE,
    ) -> list[GitHubRelease]:
        data = await self.http.request(
            f"/repos/{repo_full_name}/releases",
            params={"per_page": per_page},
        )
        return [normalize_release(r) for r in data or []]

    # --- User endpoints ---

    async def get_user(self, username: str) -> GitHubUser:
        data: dict[str, Any] = await self.http.request(f"/users/{username}")
        return normalize_user(data)

    async def get_user_repos(
        self,
        username: str,
        per_page: int = USER_REPOS_PER_PAGE,
        sort: str = "updated",
    ) -> list[GitHubRepo]:
        data = await self.http.request(
            f"/users/{username}/repos",
            params={"per_page": per_page, "sort": sort},
        )
        return [normalize_repo(r) for r in data or []]

    async def get_user_events(self, username: str, per_page: int) -> list[GitHubEvent]:
        """Recent public events, newest first, parsed into typed variants."""
        data = await self.http.request(
            f"/users/{username}/events",
            params={"per_page": per_page},
        )
        events = parse_events(data)
        logger.debug(f"Fetched {len(events)} events for {username}")
        return events

    async def get_starred(self, username: str, per_page: int) -> list[GitHubRepo]:
        data = await self.http.request(
            f"/users/{username}/starred",
            params={"per_page": per_page},
        )
        return [normalize_repo(r) for r in data or []]
