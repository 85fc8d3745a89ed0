# Services package

from insights.services.github import GitHubService

__all__ = [
    "GitHubService",
]
