"""Profile statistics rolled up from a user's repositories."""

from collections import Counter

from insights.services.github.constants import (
    ESTIMATED_COMMITS_PER_REPO,
    MAX_RECENT_REPOSITORIES,
    MAX_TOP_REPOSITORIES,
)
from insights.services.github.helpers import parse_github_datetime
from insights.services.github.types import FrozenDict, GitHubRepo, GitHubStats, GitHubUser


def active_repositories(repos: list[GitHubRepo]) -> list[GitHubRepo]:
    """Drop archived and disabled repositories."""
    return [repo for repo in repos if not repo.archived and not repo.disabled]


def language_histogram(repos: list[GitHubRepo]) -> FrozenDict:
    """Number of repositories per primary language (repos without one are skipped)."""
    return FrozenDict(Counter(repo.language for repo in repos if repo.language))


def _updated_sort_key(repo: GitHubRepo) -> float:
    if not repo.updated_at:
        return float("-inf")
    return parse_github_datetime(repo.updated_at).timestamp()


def build_github_stats(user: GitHubUser, repos: list[GitHubRepo]) -> GitHubStats:
    """
    Compute totals and rankings over the user's active repositories.

    `estimated_commits` is a heuristic (active repos x 15); an exact total
    would take one commits request per repository.
    """
    active = active_repositories(repos)

    return GitHubStats(
        user=user,
        total_repos=user.public_repos,
        total_stars=sum(repo.stars_count for repo in active),
        total_forks=sum(repo.forks_count for repo in active),
        estimated_commits=len(active) * ESTIMATED_COMMITS_PER_REPO,
        language_stats=language_histogram(active),
        top_repositories=tuple(
            sorted(active, key=lambda r: r.stars_count, reverse=True)[:MAX_TOP_REPOSITORIES]
        ),
        recent_activity=tuple(
            sorted(active, key=_updated_sort_key, reverse=True)[:MAX_RECENT_REPOSITORIES]
        ),
    )
