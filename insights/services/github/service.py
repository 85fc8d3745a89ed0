"""
GitHub data aggregation service.

Main entry point: GitHubService composes the read operations into four
cached aggregates:
- Repository data (metadata, commits, contributors, languages, releases)
- User activity (recent commits, pull requests, issues, stars, activity feed)
- Contribution calendar (daily counts, weeks, streaks)
- Profile statistics (stars, forks, languages, top/recent repositories)

Every aggregate checks the cache first; on a miss it fetches its endpoints
concurrently, fails as a whole if any request fails (nothing is cached), and
caches the result with its own TTL.
"""

import logging
from datetime import UTC, datetime

import httpx

from insights.config import Settings, settings
from insights.services.github.activity import build_user_activity
from insights.services.github.cache import ResponseCache, cached_aggregate
from insights.services.github.constants import (
    ACTIVITY_EVENTS_PER_PAGE,
    CONTRIBUTION_EVENTS_PER_PAGE,
    CONTRIBUTIONS_TTL_MINUTES,
    DEFAULT_USER_AGENT,
    GITHUB_API_URL,
    REPO_DATA_TTL_MINUTES,
    STARRED_PER_PAGE,
    STATS_TTL_MINUTES,
    USER_ACTIVITY_TTL_MINUTES,
)
from insights.services.github.contributions import build_contribution_data
from insights.services.github.exceptions import (
    GitHubAggregateError,
    UsernameRequiredError,
)
from insights.services.github.helpers import fetch_all
from insights.services.github.http_client import GitHubHTTPClient
from insights.services.github.rate_limit import RateLimitTracker
from insights.services.github.read_operations import GitHubReadOperations
from insights.services.github.statistics import build_github_stats
from insights.services.github.types import (
    CacheStats,
    ContributionData,
    FrozenDict,
    GitHubStats,
    RateLimitSnapshot,
    RepoData,
    UserActivity,
)

logger = logging.getLogger(__name__)


class GitHubService:
    """
    Cached, rate-limit-aware aggregates over the GitHub REST API.

    The cache and the HTTP client can be injected (tests pass an
    httpx.AsyncClient backed by httpx.MockTransport). Without a client the
    shared connection-pooled client is used.
    """

    def __init__(
        self,
        token: str,
        username: str | None = None,
        *,
        cache: ResponseCache | None = None,
        client: httpx.AsyncClient | None = None,
        base_url: str = GITHUB_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.token = token
        self.username = username
        self.cache = cache if cache is not None else ResponseCache()
        self.rate_limit = RateLimitTracker(authenticated=bool(token))
        self.http = GitHubHTTPClient(
            token,
            self.rate_limit,
            client=client,
            base_url=base_url,
            user_agent=user_agent,
        )
        self.reader = GitHubReadOperations(self.http)

    @classmethod
    def from_settings(
        cls,
        config: Settings = settings,
        client: httpx.AsyncClient | None = None,
    ) -> "GitHubService":
        """Build a service from environment configuration."""
        return cls(
            config.github_token,
            config.github_username,
            cache=ResponseCache(maxsize=config.cache_max_entries),
            client=client,
            base_url=config.github_api_url,
            user_agent=config.github_user_agent,
        )

    def _resolve_username(self, username: str | None) -> str:
        """Explicit username, else the default; an empty string counts as not given."""
        user = username or self.username
        if not user:
            raise UsernameRequiredError()
        return user

    # --- Aggregates ---

    @cached_aggregate("repo", ttl_minutes=REPO_DATA_TTL_MINUTES)
    async def get_repo_data(self, repo_full_name: str) -> RepoData:
        """
        Fetch metadata, commits, contributors, languages and releases of a repo.

        Args:
            repo_full_name: Repository in "owner/repo" form

        Returns:
            RepoData stamped with the fetch time

        Raises:
            GitHubAggregateError: If any of the five requests fails or returns
                a payload that cannot be normalized
        """
        try:
            repository, commits, contributors, languages, releases = await fetch_all(
                self.reader.get_repository(repo_full_name),
                self.reader.get_commits(repo_full_name),
                self.reader.get_contributors(repo_full_name),
                self.reader.get_languages(repo_full_name),
                self.reader.get_releases(repo_full_name),
            )
            data = RepoData(
                repository=repository,
                commits=tuple(commits),
                contributors=tuple(contributors),
                languages=FrozenDict(languages),
                releases=tuple(releases),
                fetched_at=datetime.now(UTC),
            )
        except Exception as e:
            logger.warning(f"Repository data fetch failed for {repo_full_name}: {e!r}")
            raise GitHubAggregateError("Failed to fetch repository data", e) from e

        logger.info(f"Fetched repository data for {repo_full_name}")
        return data

    async def get_user_activity(self, username: str | None = None) -> UserActivity:
        """
        Fetch a user's recent commits, pull requests, issues, stars and feed.

        Args:
            username: GitHub login (defaults to the service's username)

        Raises:
            UsernameRequiredError: If no username is available
            GitHubAggregateError: If the events or starred request fails
        """
        return await self._user_activity(self._resolve_username(username))

    @cached_aggregate("user_activity", ttl_minutes=USER_ACTIVITY_TTL_MINUTES)
    async def _user_activity(self, username: str) -> UserActivity:
        try:
            events, starred = await fetch_all(
                self.reader.get_user_events(username, ACTIVITY_EVENTS_PER_PAGE),
                self.reader.get_starred(username, STARRED_PER_PAGE),
            )
            activity = build_user_activity(events, starred)
        except Exception as e:
            logger.warning(f"User activity fetch failed for {username}: {e!r}")
            raise GitHubAggregateError("Failed to fetch user activity", e) from e

        logger.info(f"Fetched activity for {username} ({len(events)} events)")
        return activity

    async def get_contribution_data(self, username: str | None = None) -> ContributionData:
        """
        Build the trailing-year contribution calendar from push events.

        Args:
            username: GitHub login (defaults to the service's username)

        Raises:
            UsernameRequiredError: If no username is available
            GitHubAggregateError: If the events request fails or an event
                carries an unparseable timestamp
        """
        return await self._contribution_data(self._resolve_username(username))

    @cached_aggregate("contributions", ttl_minutes=CONTRIBUTIONS_TTL_MINUTES)
    async def _contribution_data(self, username: str) -> ContributionData:
        try:
            events = await self.reader.get_user_events(username, CONTRIBUTION_EVENTS_PER_PAGE)
            contributions = build_contribution_data(events, datetime.now(UTC).date())
        except Exception as e:
            logger.warning(f"Contribution data fetch failed for {username}: {e!r}")
            raise GitHubAggregateError("Failed to fetch contribution data", e) from e

        logger.info(f"Built contribution calendar for {username}")
        return contributions

    async def get_github_stats(self, username: str | None = None) -> GitHubStats:
        """
        Roll up stars, forks and languages over a user's repositories.

        Args:
            username: GitHub login (defaults to the service's username)

        Raises:
            UsernameRequiredError: If no username is available
            GitHubAggregateError: If the profile or repositories request fails
        """
        return await self._github_stats(self._resolve_username(username))

    @cached_aggregate("stats", ttl_minutes=STATS_TTL_MINUTES)
    async def _github_stats(self, username: str) -> GitHubStats:
        try:
            user, repos = await fetch_all(
                self.reader.get_user(username),
                self.reader.get_user_repos(username),
            )
            stats = build_github_stats(user, repos)
        except Exception as e:
            logger.warning(f"Stats fetch failed for {username}: {e!r}")
            raise GitHubAggregateError("Failed to fetch GitHub stats", e) from e

        logger.info(f"Computed stats for {username} over {len(repos)} repositories")
        return stats

    # --- Introspection ---

    def get_rate_limit_info(self) -> RateLimitSnapshot:
        return self.rate_limit.info()

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def clear_cache(self) -> None:
        """Clear cache (useful for testing or forcing fresh data)."""
        self.cache.clear()
