"""Unit tests for event parsing and activity feed classification."""

from __future__ import annotations

from insights.services.github.activity import build_user_activity, commits_from_push
from insights.services.github.events import (
    CreateEvent,
    ForkEvent,
    IgnoredEvent,
    IssuesEvent,
    PullRequestEvent,
    PushEvent,
    WatchEvent,
    parse_event,
    parse_events,
)
from insights.services.github.normalizers import normalize_repo
from tests.helpers.github_fakes import event_json, push_event_json, repo_json


def _pr_event(action: str = "opened", title: str = "Add feature") -> dict:
    return event_json(
        "PullRequestEvent",
        payload={
            "action": action,
            "pull_request": {
                "id": 11,
                "number": 4,
                "title": title,
                "body": None,
                "state": "open",
                "html_url": "https://github.com/octo/demo/pull/4",
                "created_at": "2026-01-15T12:00:00Z",
                "updated_at": "2026-01-15T12:00:00Z",
                "merged_at": None,
            },
        },
    )


def _issue_event(action: str = "opened", title: str = "Bug") -> dict:
    return event_json(
        "IssuesEvent",
        payload={
            "action": action,
            "issue": {
                "id": 21,
                "number": 9,
                "title": title,
                "body": "Steps",
                "state": "open",
                "html_url": "https://github.com/octo/demo/issues/9",
            },
        },
    )


# ═══════════════════════════════════════════════════════════════════════════
# parse_event
# ═══════════════════════════════════════════════════════════════════════════


class TestParseEvent:
    """Tests for raw event stream -> typed variants."""

    def test_push_event(self):
        event = parse_event(push_event_json(commit_count=2))

        assert isinstance(event, PushEvent)
        assert event.commit_count == 2
        assert event.commits[0].sha == "sha0"
        assert event.commits[0].author_name == "Octo"
        assert event.repo.name == "octo/demo"

    def test_push_event_without_commits(self):
        event = parse_event(event_json("PushEvent", payload={}))

        assert isinstance(event, PushEvent)
        assert event.commit_count == 0

    def test_pull_request_event(self):
        event = parse_event(_pr_event(action="closed"))

        assert isinstance(event, PullRequestEvent)
        assert event.action == "closed"
        assert event.pull_request is not None
        assert event.pull_request.number == 4
        assert event.pull_request.body == ""
        assert event.pull_request.repository.name == "demo"
        assert event.pull_request.repository.full_name == "octo/demo"

    def test_pull_request_event_without_object(self):
        event = parse_event(event_json("PullRequestEvent", payload={"action": "opened"}))

        assert isinstance(event, PullRequestEvent)
        assert event.pull_request is None

    def test_issues_event(self):
        event = parse_event(_issue_event())

        assert isinstance(event, IssuesEvent)
        assert event.issue is not None
        assert event.issue.title == "Bug"

    def test_watch_fork_create(self):
        assert isinstance(parse_event(event_json("WatchEvent")), WatchEvent)
        assert isinstance(parse_event(event_json("ForkEvent")), ForkEvent)

        create = parse_event(event_json("CreateEvent", payload={"ref_type": "branch"}))
        assert isinstance(create, CreateEvent)
        assert create.ref_type == "branch"

    def test_unknown_type_is_ignored(self):
        event = parse_event(event_json("GollumEvent"))

        assert isinstance(event, IgnoredEvent)
        assert event.type == "GollumEvent"

    def test_missing_repo_uses_placeholders(self):
        raw = event_json("WatchEvent")
        raw["repo"] = None

        event = parse_event(raw)

        assert event.repo.name == "Unknown"
        assert event.repo.url == "#"

    def test_event_day_is_utc(self):
        event = parse_event(push_event_json(created_at="2026-03-01T23:59:59Z"))

        assert event.day.isoformat() == "2026-03-01"

    def test_parse_events_handles_none(self):
        assert parse_events(None) == []


# ═══════════════════════════════════════════════════════════════════════════
# commits_from_push
# ═══════════════════════════════════════════════════════════════════════════


class TestCommitsFromPush:
    def test_takes_first_three_commits(self):
        event = parse_event(push_event_json(commit_count=5))

        commits = commits_from_push(event)

        assert [c.sha for c in commits] == ["sha0", "sha1", "sha2"]

    def test_synthesizes_web_url_and_date(self):
        event = parse_event(push_event_json(commit_count=1, repo="octo/site"))

        commit = commits_from_push(event)[0]

        assert commit.url == "https://github.com/octo/site/commit/sha0"
        assert commit.author.date == "2026-01-15T12:00:00Z"
        assert commit.repository == "octo/site"


# ═══════════════════════════════════════════════════════════════════════════
# build_user_activity
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildUserActivity:
    """Tests for classifying events into the activity lists."""

    def test_single_watch_event(self):
        activity = build_user_activity(parse_events([event_json("WatchEvent", repo="x/y")]), [])

        assert len(activity.activity_feed) == 1
        item = activity.activity_feed[0]
        assert item.type == "star"
        assert item.title == "Starred x/y"
        assert item.repository == "x/y"
        assert activity.recent_commits == ()
        assert activity.pull_requests == ()
        assert activity.issues == ()

    def test_push_event(self):
        activity = build_user_activity(parse_events([push_event_json(commit_count=4)]), [])

        assert len(activity.recent_commits) == 3
        item = activity.activity_feed[0]
        assert item.type == "commit"
        assert item.title == "Pushed to octo/demo"
        assert item.details == "4 commits"
        assert item.url == "https://api.github.com/repos/octo/demo"

    def test_pull_request_event(self):
        activity = build_user_activity(parse_events([_pr_event(title="Add feature")]), [])

        assert len(activity.pull_requests) == 1
        item = activity.activity_feed[0]
        assert item.type == "pr"
        assert item.title == "opened pull request in octo/demo"
        assert item.url == "https://github.com/octo/demo/pull/4"
        assert item.details == "Add feature"

    def test_issue_event(self):
        activity = build_user_activity(parse_events([_issue_event(action="closed")]), [])

        assert len(activity.issues) == 1
        item = activity.activity_feed[0]
        assert item.type == "issue"
        assert item.title == "closed issue in octo/demo"
        assert item.details == "Bug"

    def test_fork_and_create_events(self):
        events = parse_events(
            [
                event_json("ForkEvent"),
                event_json("CreateEvent", payload={"ref_type": "tag"}),
                event_json("CreateEvent", payload={}),
            ]
        )

        titles = [item.title for item in build_user_activity(events, []).activity_feed]

        assert titles == [
            "Forked octo/demo",
            "Created tag in octo/demo",
            "Created repository in octo/demo",
        ]

    def test_ignored_events_produce_nothing(self):
        events = parse_events(
            [
                event_json("DeleteEvent"),
                event_json("PullRequestEvent", payload={"action": "opened"}),
                event_json("IssuesEvent", payload={"action": "opened"}),
            ]
        )

        activity = build_user_activity(events, [])

        assert activity.activity_feed == ()
        assert activity.pull_requests == ()
        assert activity.issues == ()

    def test_feed_keeps_stream_order(self):
        events = parse_events(
            [
                event_json("WatchEvent", repo="a/one", created_at="2026-01-15T12:00:00Z"),
                push_event_json(repo="b/two", created_at="2026-01-14T12:00:00Z"),
                event_json("ForkEvent", repo="c/three", created_at="2026-01-13T12:00:00Z"),
            ]
        )

        feed = build_user_activity(events, []).activity_feed

        assert [item.repository for item in feed] == ["a/one", "b/two", "c/three"]

    def test_lists_are_truncated(self):
        raw = [push_event_json(commit_count=3) for _ in range(10)]
        raw += [_pr_event() for _ in range(25)]
        raw += [_issue_event() for _ in range(25)]

        activity = build_user_activity(parse_events(raw), [])

        assert len(activity.recent_commits) == 20
        assert len(activity.pull_requests) == 20
        assert len(activity.issues) == 20
        assert len(activity.activity_feed) == 50

    def test_starred_repos_pass_through(self):
        starred = [normalize_repo(repo_json(full_name="x/y", name="y"))]

        activity = build_user_activity([], starred)

        assert activity.starred_repos == tuple(starred)
