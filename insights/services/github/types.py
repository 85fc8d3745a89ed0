"""Data types for GitHub API responses and derived aggregates."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal, NoReturn

from insights.services.github.formatting import get_language_color


class FrozenDict(dict):
    """A dict that rejects mutation, for mappings held by cached aggregates."""

    def _readonly(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self),))


@dataclass(frozen=True)
class GitHubRepo:
    """Normalized GitHub repository data."""

    github_id: int
    name: str
    full_name: str
    description: str | None
    url: str
    language: str | None
    stars_count: int
    forks_count: int
    updated_at: str
    homepage: str | None = None
    watchers_count: int = 0
    open_issues_count: int = 0
    created_at: str | None = None
    pushed_at: str | None = None
    topics: tuple[str, ...] = ()
    visibility: str = "public"
    archived: bool = False
    disabled: bool = False
    size: int = 0
    default_branch: str = "main"
    license_name: str | None = None  # SPDX identifier (e.g., "MIT", "Apache-2.0")


@dataclass(frozen=True)
class GitHubUser:
    """Public profile of a GitHub user."""

    login: str
    github_id: int
    avatar_url: str | None
    url: str
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class Contributor:
    """Contributor information."""

    login: str
    avatar_url: str | None
    url: str | None
    contributions: int  # Number of commits


@dataclass(frozen=True)
class CommitAuthor:
    name: str
    email: str
    date: str  # ISO 8601


@dataclass(frozen=True)
class GitHubCommit:
    """A commit, either from the commits API or synthesized from a push event."""

    sha: str
    message: str
    author: CommitAuthor
    url: str
    repository: str | None = None  # owner/repo


@dataclass(frozen=True)
class RepoRef:
    name: str
    full_name: str


@dataclass(frozen=True)
class GitHubPullRequest:
    github_id: int
    number: int
    title: str
    body: str
    state: str  # "open", "closed" or "merged"
    url: str
    created_at: str | None
    updated_at: str | None
    merged_at: str | None
    repository: RepoRef


@dataclass(frozen=True)
class GitHubIssue:
    github_id: int
    number: int
    title: str
    body: str
    state: str  # "open" or "closed"
    url: str
    created_at: str | None
    updated_at: str | None
    repository: RepoRef


@dataclass(frozen=True)
class ReleaseAsset:
    name: str
    download_count: int
    download_url: str


@dataclass(frozen=True)
class GitHubRelease:
    github_id: int
    tag_name: str
    name: str | None
    body: str
    draft: bool
    prerelease: bool
    created_at: str | None
    published_at: str | None
    url: str
    assets: tuple[ReleaseAsset, ...] = ()


@dataclass(frozen=True)
class LanguageStat:
    """Language statistics for a repository."""

    name: str
    bytes: int
    percentage: float
    color: str  # Hex color for display


@dataclass(frozen=True)
class RepoData:
    """Everything fetched for one repository in a single aggregate call."""

    repository: GitHubRepo
    commits: tuple[GitHubCommit, ...]
    contributors: tuple[Contributor, ...]
    languages: Mapping[str, int]  # language -> bytes
    releases: tuple[GitHubRelease, ...]
    fetched_at: datetime

    @property
    def total_language_bytes(self) -> int:
        return sum(self.languages.values())

    def language_breakdown(self) -> list[LanguageStat]:
        """Languages with their share of the code, largest first."""
        total_bytes = self.total_language_bytes
        if total_bytes == 0:
            return []

        languages = [
            LanguageStat(
                name=name,
                bytes=byte_count,
                percentage=round((byte_count / total_bytes) * 100, 1),
                color=get_language_color(name),
            )
            for name, byte_count in self.languages.items()
        ]

        languages.sort(key=lambda x: x.percentage, reverse=True)
        return languages


ActivityType = Literal["commit", "pr", "issue", "star", "fork", "create"]


@dataclass(frozen=True)
class ActivityItem:
    """Single entry of a user's activity feed."""

    type: ActivityType
    date: str  # ISO 8601, from the event
    repository: str  # owner/repo
    title: str
    url: str
    details: str | None = None


@dataclass(frozen=True)
class UserActivity:
    recent_commits: tuple[GitHubCommit, ...]
    pull_requests: tuple[GitHubPullRequest, ...]
    issues: tuple[GitHubIssue, ...]
    starred_repos: tuple[GitHubRepo, ...]
    activity_feed: tuple[ActivityItem, ...]


@dataclass(frozen=True)
class ContributionDay:
    date: date  # UTC calendar day
    count: int
    level: int  # 0-4


@dataclass(frozen=True)
class ContributionWeek:
    """Days of one Sunday-to-Saturday week (first and last may be partial)."""

    contribution_days: tuple[ContributionDay, ...]
    first_day: date


@dataclass(frozen=True)
class ContributionCalendar:
    total_contributions: int
    weeks: tuple[ContributionWeek, ...]


@dataclass(frozen=True)
class ContributionData:
    """Contribution calendar approximated from push events."""

    total_contributions: int
    weeks: tuple[ContributionWeek, ...]
    contribution_calendar: ContributionCalendar
    longest_streak: int
    current_streak: int

    @property
    def days(self) -> list[ContributionDay]:
        return [day for week in self.weeks for day in week.contribution_days]


@dataclass(frozen=True)
class GitHubStats:
    """Profile-level rollup over a user's active repositories."""

    user: GitHubUser
    total_repos: int
    total_stars: int
    total_forks: int
    # Rough estimate (active repos x 15), not a real commit count
    estimated_commits: int
    language_stats: Mapping[str, int]  # language -> number of repos
    top_repositories: tuple[GitHubRepo, ...]
    recent_activity: tuple[GitHubRepo, ...]


@dataclass(frozen=True)
class RateLimitSnapshot:
    remaining: int
    reset: int  # epoch milliseconds
    limit: int


@dataclass(frozen=True)
class CacheStats:
    size: int
    keys: list[str]
    maxsize: int
