"""
Typed view of the GitHub public event stream.

Raw events from /users/{user}/events are parsed into one dataclass per event
kind the aggregates care about. Every other kind becomes an IgnoredEvent, so
consumers can dispatch on type instead of probing payload keys.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from insights.services.github.helpers import parse_github_datetime
from insights.services.github.normalizers import normalize_issue, normalize_pull_request
from insights.services.github.types import GitHubIssue, GitHubPullRequest

UNKNOWN_REPOSITORY = "Unknown"


@dataclass(frozen=True)
class EventRepo:
    name: str  # owner/repo
    url: str  # API url of the repository


@dataclass(frozen=True)
class PushCommit:
    sha: str
    message: str
    author_name: str
    author_email: str


@dataclass(frozen=True)
class BaseEvent:
    created_at: str  # ISO 8601
    repo: EventRepo

    @property
    def day(self) -> date:
        """UTC calendar day the event happened on."""
        return parse_github_datetime(self.created_at).date()


@dataclass(frozen=True)
class PushEvent(BaseEvent):
    commits: tuple[PushCommit, ...] = ()

    @property
    def commit_count(self) -> int:
        return len(self.commits)


@dataclass(frozen=True)
class PullRequestEvent(BaseEvent):
    action: str = ""
    pull_request: GitHubPullRequest | None = None


@dataclass(frozen=True)
class IssuesEvent(BaseEvent):
    action: str = ""
    issue: GitHubIssue | None = None


@dataclass(frozen=True)
class WatchEvent(BaseEvent):
    pass


@dataclass(frozen=True)
class ForkEvent(BaseEvent):
    pass


@dataclass(frozen=True)
class CreateEvent(BaseEvent):
    ref_type: str | None = None


@dataclass(frozen=True)
class IgnoredEvent(BaseEvent):
    """An event kind no aggregate uses (GollumEvent, DeleteEvent, ...)."""

    type: str = ""


GitHubEvent = (
    PushEvent
    | PullRequestEvent
    | IssuesEvent
    | WatchEvent
    | ForkEvent
    | CreateEvent
    | IgnoredEvent
)


def _parse_push_commit(data: dict[str, Any]) -> PushCommit:
    author = data.get("author") or {}
    return PushCommit(
        sha=data.get("sha", ""),
        message=data.get("message", ""),
        author_name=author.get("name", ""),
        author_email=author.get("email", ""),
    )


def parse_event(raw: dict[str, Any]) -> GitHubEvent:
    """Convert one raw event-stream entry into its typed variant."""
    repo_data = raw.get("repo") or {}
    repo = EventRepo(
        name=repo_data.get("name") or UNKNOWN_REPOSITORY,
        url=repo_data.get("url") or "#",
    )
    created_at = raw.get("created_at", "")
    payload: dict[str, Any] = raw.get("payload") or {}
    event_type = raw.get("type", "")

    if event_type == "PushEvent":
        return PushEvent(
            created_at=created_at,
            repo=repo,
            commits=tuple(_parse_push_commit(c) for c in payload.get("commits") or ()),
        )
    if event_type == "PullRequestEvent":
        pr_data = payload.get("pull_request")
        return PullRequestEvent(
            created_at=created_at,
            repo=repo,
            action=payload.get("action", ""),
            pull_request=normalize_pull_request(pr_data, repo.name) if pr_data else None,
        )
    if event_type == "IssuesEvent":
        issue_data = payload.get("issue")
        return IssuesEvent(
            created_at=created_at,
            repo=repo,
            action=payload.get("action", ""),
            issue=normalize_issue(issue_data, repo.name) if issue_data else None,
        )
    if event_type == "WatchEvent":
        return WatchEvent(created_at=created_at, repo=repo)
    if event_type == "ForkEvent":
        return ForkEvent(created_at=created_at, repo=repo)
    if event_type == "CreateEvent":
        return CreateEvent(created_at=created_at, repo=repo, ref_type=payload.get("ref_type"))

    return IgnoredEvent(created_at=created_at, repo=repo, type=event_type)


def parse_events(raw_events: list[dict[str, Any]] | None) -> list[GitHubEvent]:
    return [parse_event(raw) for raw in raw_events or []]
