"""Conversion of raw GitHub v3 payloads into the dataclasses in types.py."""

from typing import Any

from insights.services.github.constants import GITHUB_WEB_URL
from insights.services.github.types import (
    CommitAuthor,
    Contributor,
    GitHubCommit,
    GitHubIssue,
    GitHubPullRequest,
    GitHubRelease,
    GitHubRepo,
    GitHubUser,
    ReleaseAsset,
    RepoRef,
)


def repo_ref(full_name: str) -> RepoRef:
    """Split "owner/repo" into the bare name and the full name."""
    _, _, name = full_name.partition("/")
    return RepoRef(name=name or full_name, full_name=full_name)


def normalize_repo(data: dict[str, Any]) -> GitHubRepo:
    """Convert GitHub API response to GitHubRepo dataclass."""
    # Extract license SPDX identifier if present
    license_data = data.get("license")
    license_name = license_data.get("spdx_id") if license_data else None

    return GitHubRepo(
        github_id=data["id"],
        name=data["name"],
        full_name=data["full_name"],
        description=data.get("description"),
        url=data["html_url"],
        language=data.get("language"),
        stars_count=data.get("stargazers_count", 0),
        forks_count=data.get("forks_count", 0),
        updated_at=data.get("updated_at", ""),
        homepage=data.get("homepage"),
        watchers_count=data.get("watchers_count", 0),
        open_issues_count=data.get("open_issues_count", 0),
        created_at=data.get("created_at"),
        pushed_at=data.get("pushed_at"),
        topics=tuple(data.get("topics") or ()),
        visibility=data.get("visibility", "public"),
        archived=data.get("archived", False),
        disabled=data.get("disabled", False),
        size=data.get("size", 0),
        default_branch=data.get("default_branch", "main"),
        license_name=license_name,
    )


def normalize_user(data: dict[str, Any]) -> GitHubUser:
    return GitHubUser(
        login=data["login"],
        github_id=data["id"],
        avatar_url=data.get("avatar_url"),
        url=data.get("html_url", f"{GITHUB_WEB_URL}/{data['login']}"),
        name=data.get("name"),
        company=data.get("company"),
        blog=data.get("blog"),
        location=data.get("location"),
        email=data.get("email"),
        bio=data.get("bio"),
        public_repos=data.get("public_repos", 0),
        public_gists=data.get("public_gists", 0),
        followers=data.get("followers", 0),
        following=data.get("following", 0),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def normalize_contributor(data: dict[str, Any]) -> Contributor:
    return Contributor(
        login=data.get("login", "anonymous"),
        avatar_url=data.get("avatar_url"),
        url=data.get("html_url"),
        contributions=data.get("contributions", 0),
    )


def normalize_commit(data: dict[str, Any], repository: str | None = None) -> GitHubCommit:
    """Convert an entry of the commits API into GitHubCommit."""
    commit = data.get("commit", {})
    author = commit.get("author") or {}

    return GitHubCommit(
        sha=data["sha"],
        message=commit.get("message", ""),
        author=CommitAuthor(
            name=author.get("name", ""),
            email=author.get("email", ""),
            date=author.get("date", ""),
        ),
        url=data.get("html_url", ""),
        repository=repository,
    )


def normalize_release(data: dict[str, Any]) -> GitHubRelease:
    return GitHubRelease(
        github_id=data["id"],
        tag_name=data["tag_name"],
        name=data.get("name"),
        body=data.get("body") or "",
        draft=data.get("draft", False),
        prerelease=data.get("prerelease", False),
        created_at=data.get("created_at"),
        published_at=data.get("published_at"),
        url=data.get("html_url", ""),
        assets=tuple(
            ReleaseAsset(
                name=asset.get("name", ""),
                download_count=asset.get("download_count", 0),
                download_url=asset.get("browser_download_url", ""),
            )
            for asset in data.get("assets") or []
        ),
    )


def normalize_pull_request(data: dict[str, Any], repo_full_name: str) -> GitHubPullRequest:
    return GitHubPullRequest(
        github_id=data.get("id", 0),
        number=data.get("number", 0),
        title=data.get("title", ""),
        body=data.get("body") or "",
        state=data.get("state", "open"),
        url=data.get("html_url", ""),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
        merged_at=data.get("merged_at"),
        repository=repo_ref(repo_full_name),
    )


def normalize_issue(data: dict[str, Any], repo_full_name: str) -> GitHubIssue:
    return GitHubIssue(
        github_id=data.get("id", 0),
        number=data.get("number", 0),
        title=data.get("title", ""),
        body=data.get("body") or "",
        state=data.get("state", "open"),
        url=data.get("html_url", ""),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
        repository=repo_ref(repo_full_name),
    )
