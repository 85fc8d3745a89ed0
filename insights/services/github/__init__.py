"""
GitHub service package.

Re-exports all public types and classes.
Usage: `from insights.services.github import GitHubService, RepoData`

Module structure:
- service.py: Main GitHubService facade (cached aggregates)
- read_operations.py: One method per REST endpoint
- http_client.py: Shared AsyncClient and the authenticated request wrapper
- cache.py: TTL response cache and the caching decorator
- rate_limit.py: Rate limit tracking from response headers
- events.py: Typed event-stream variants
- activity.py / contributions.py / statistics.py: Aggregate computations
- formatting.py: Display helpers
- helpers.py: Header parsing, error mapping, fail-fast concurrent fetch
- types.py: Data types and response models
- exceptions.py: Custom exceptions
- constants.py: API constants and configuration
"""

from insights.services.github.cache import ResponseCache, make_cache_key
from insights.services.github.constants import GITHUB_LANGUAGE_COLORS
from insights.services.github.exceptions import (
    GitHubAggregateError,
    GitHubAPIError,
    UsernameRequiredError,
)
from insights.services.github.formatting import (
    format_number,
    format_relative_time,
    get_language_color,
)
from insights.services.github.helpers import RateLimitInfo
from insights.services.github.http_client import GitHubHTTPClient, close_github_client
from insights.services.github.rate_limit import RateLimitTracker
from insights.services.github.service import GitHubService
from insights.services.github.types import (
    ActivityItem,
    CacheStats,
    FrozenDict,
    ContributionData,
    ContributionDay,
    ContributionWeek,
    GitHubCommit,
    GitHubIssue,
    GitHubPullRequest,
    GitHubRelease,
    GitHubRepo,
    GitHubStats,
    GitHubUser,
    LanguageStat,
    RateLimitSnapshot,
    RepoData,
    UserActivity,
)

__all__ = [
    # Service (main entry point)
    "GitHubService",
    # Building blocks (for direct use if needed)
    "GitHubHTTPClient",
    "ResponseCache",
    "RateLimitTracker",
    "make_cache_key",
    # HTTP client lifecycle
    "close_github_client",
    # Utilities
    "RateLimitInfo",
    "format_number",
    "format_relative_time",
    "get_language_color",
    # Exceptions
    "GitHubAPIError",
    "GitHubAggregateError",
    "UsernameRequiredError",
    # Types
    "ActivityItem",
    "CacheStats",
    "FrozenDict",
    "ContributionData",
    "ContributionDay",
    "ContributionWeek",
    "GitHubCommit",
    "GitHubIssue",
    "GitHubPullRequest",
    "GitHubRelease",
    "GitHubRepo",
    "GitHubStats",
    "GitHubUser",
    "LanguageStat",
    "RateLimitSnapshot",
    "RepoData",
    "UserActivity",
    # Constants
    "GITHUB_LANGUAGE_COLORS",
]
