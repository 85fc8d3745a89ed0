"""
Activity feed classification.

Turns a user's typed event stream into recent commits, pull requests, issues
and a display feed. Events are processed in stream order (newest first as
GitHub returns them) and lists are truncated, never re-sorted.
"""

from insights.services.github.constants import (
    COMMITS_PER_PUSH,
    GITHUB_WEB_URL,
    MAX_ACTIVITY_ITEMS,
    MAX_ISSUES,
    MAX_PULL_REQUESTS,
    MAX_RECENT_COMMITS,
)
from insights.services.github.events import (
    CreateEvent,
    ForkEvent,
    GitHubEvent,
    IssuesEvent,
    PullRequestEvent,
    PushEvent,
    WatchEvent,
)
from insights.services.github.types import (
    ActivityItem,
    CommitAuthor,
    GitHubCommit,
    GitHubIssue,
    GitHubPullRequest,
    GitHubRepo,
    UserActivity,
)


def commits_from_push(event: PushEvent) -> list[GitHubCommit]:
    """Synthesize commit records for the first few commits of a push."""
    return [
        GitHubCommit(
            sha=commit.sha,
            message=commit.message,
            author=CommitAuthor(
                name=commit.author_name,
                email=commit.author_email,
                date=event.created_at,
            ),
            url=f"{GITHUB_WEB_URL}/{event.repo.name}/commit/{commit.sha}",
            repository=event.repo.name,
        )
        for commit in event.commits[:COMMITS_PER_PUSH]
    ]


def build_user_activity(
    events: list[GitHubEvent],
    starred_repos: list[GitHubRepo],
) -> UserActivity:
    """
    Classify events into the typed activity lists.

    Args:
        events: Parsed event stream, in the order GitHub returned it
        starred_repos: Repositories the user starred (passed through)

    Returns:
        UserActivity with truncated commit/PR/issue lists and activity feed
    """
    recent_commits: list[GitHubCommit] = []
    pull_requests: list[GitHubPullRequest] = []
    issues: list[GitHubIssue] = []
    feed: list[ActivityItem] = []

    for event in events:
        repo_name = event.repo.name

        if isinstance(event, PushEvent):
            recent_commits.extend(commits_from_push(event))
            feed.append(
                ActivityItem(
                    type="commit",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"Pushed to {repo_name}",
                    url=event.repo.url,
                    details=f"{event.commit_count} commits",
                )
            )
        elif isinstance(event, PullRequestEvent) and event.pull_request is not None:
            pr = event.pull_request
            pull_requests.append(pr)
            feed.append(
                ActivityItem(
                    type="pr",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"{event.action} pull request in {repo_name}",
                    url=pr.url,
                    details=pr.title,
                )
            )
        elif isinstance(event, IssuesEvent) and event.issue is not None:
            issue = event.issue
            issues.append(issue)
            feed.append(
                ActivityItem(
                    type="issue",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"{event.action} issue in {repo_name}",
                    url=issue.url,
                    details=issue.title,
                )
            )
        elif isinstance(event, WatchEvent):
            feed.append(
                ActivityItem(
                    type="star",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"Starred {repo_name}",
                    url=event.repo.url,
                )
            )
        elif isinstance(event, ForkEvent):
            feed.append(
                ActivityItem(
                    type="fork",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"Forked {repo_name}",
                    url=event.repo.url,
                )
            )
        elif isinstance(event, CreateEvent):
            feed.append(
                ActivityItem(
                    type="create",
                    date=event.created_at,
                    repository=repo_name,
                    title=f"Created {event.ref_type or 'repository'} in {repo_name}",
                    url=event.repo.url,
                )
            )
        # PR/issue events without a payload object and IgnoredEvent add nothing

    return UserActivity(
        recent_commits=tuple(recent_commits[:MAX_RECENT_COMMITS]),
        pull_requests=tuple(pull_requests[:MAX_PULL_REQUESTS]),
        issues=tuple(issues[:MAX_ISSUES]),
        starred_repos=tuple(starred_repos),
        activity_feed=tuple(feed[:MAX_ACTIVITY_ITEMS]),
    )
