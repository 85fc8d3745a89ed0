"""Unit tests for profile statistics and repository language breakdown."""

from __future__ import annotations

from datetime import UTC, datetime

from insights.services.github.normalizers import normalize_repo, normalize_user
from insights.services.github.statistics import (
    active_repositories,
    build_github_stats,
    language_histogram,
)
from insights.services.github.types import FrozenDict, GitHubRepo, RepoData
from tests.helpers.github_fakes import repo_json, user_json


def _repo(name: str, **overrides: object) -> GitHubRepo:
    return normalize_repo(repo_json(name=name, full_name=f"octo/{name}", **overrides))


def _repo_data(languages: dict[str, int]) -> RepoData:
    return RepoData(
        repository=_repo("demo"),
        commits=(),
        contributors=(),
        languages=FrozenDict(languages),
        releases=(),
        fetched_at=datetime(2026, 1, 1, tzinfo=UTC),
    )


# ═══════════════════════════════════════════════════════════════════════════
# build_github_stats
# ═══════════════════════════════════════════════════════════════════════════


class TestBuildGitHubStats:
    """Tests for totals and rankings over a user's repositories."""

    def test_totals_skip_archived_and_disabled(self):
        repos = [
            _repo("a", stargazers_count=10, forks_count=1),
            _repo("b", stargazers_count=5, forks_count=2),
            _repo("old", stargazers_count=100, forks_count=50, archived=True),
            _repo("off", stargazers_count=100, forks_count=50, disabled=True),
        ]

        stats = build_github_stats(normalize_user(user_json(public_repos=4)), repos)

        assert stats.total_stars == 15
        assert stats.total_forks == 3
        assert stats.estimated_commits == 30
        assert stats.total_repos == 4

    def test_top_repositories_by_stars(self):
        repos = [_repo(f"r{i}", stargazers_count=i) for i in range(12)]

        stats = build_github_stats(normalize_user(user_json()), repos)

        assert len(stats.top_repositories) == 10
        assert stats.top_repositories[0].name == "r11"
        assert stats.top_repositories[-1].name == "r2"

    def test_recent_activity_by_updated_at(self):
        repos = [
            _repo("older", updated_at="2025-01-01T00:00:00Z"),
            _repo("newest", updated_at="2026-02-01T00:00:00Z"),
            _repo("never", updated_at=""),
            _repo("middle", updated_at="2025-06-01T00:00:00Z"),
        ]

        stats = build_github_stats(normalize_user(user_json()), repos)

        assert [r.name for r in stats.recent_activity] == ["newest", "middle", "older", "never"]

    def test_language_stats_count_repositories(self):
        repos = [
            _repo("a", language="Python"),
            _repo("b", language="Python"),
            _repo("c", language="Go"),
            _repo("d", language=None),
        ]

        stats = build_github_stats(normalize_user(user_json()), repos)

        assert stats.language_stats == {"Python": 2, "Go": 1}

    def test_no_repositories(self):
        stats = build_github_stats(normalize_user(user_json(public_repos=0)), [])

        assert stats.total_stars == 0
        assert stats.estimated_commits == 0
        assert stats.top_repositories == ()
        assert stats.language_stats == {}


class TestRepositoryFilters:
    def test_active_repositories(self):
        repos = [_repo("a"), _repo("b", archived=True)]

        assert [r.name for r in active_repositories(repos)] == ["a"]

    def test_language_histogram(self):
        assert language_histogram([_repo("a", language="Rust")]) == {"Rust": 1}


# ═══════════════════════════════════════════════════════════════════════════
# RepoData.language_breakdown
# ═══════════════════════════════════════════════════════════════════════════


class TestLanguageBreakdown:
    """Tests for byte-share percentages of a repository's languages."""

    def test_percentages_and_order(self):
        data = _repo_data({"CSS": 100, "TypeScript": 300})

        breakdown = data.language_breakdown()

        assert data.total_language_bytes == 400
        assert [(s.name, s.percentage) for s in breakdown] == [
            ("TypeScript", 75.0),
            ("CSS", 25.0),
        ]
        assert breakdown[0].bytes == 300
        assert breakdown[0].color == "#2b7489"

    def test_rounds_to_one_decimal(self):
        breakdown = _repo_data({"Python": 2, "Shell": 1}).language_breakdown()

        assert [s.percentage for s in breakdown] == [66.7, 33.3]

    def test_unknown_language_gets_default_color(self):
        breakdown = _repo_data({"Brainfudge": 10}).language_breakdown()

        assert breakdown[0].color == "#8b949e"
        assert breakdown[0].percentage == 100.0

    def test_no_languages(self):
        assert _repo_data({}).language_breakdown() == []
