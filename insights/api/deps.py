"""API dependencies."""

from functools import lru_cache

from insights.config import settings
from insights.services.github import GitHubService


@lru_cache(maxsize=1)
def get_github_service() -> GitHubService:
    """Process-wide GitHubService so every request shares one cache and quota view."""
    return GitHubService.from_settings(settings)
