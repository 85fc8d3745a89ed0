"""Shared fixtures for all tests.

Provides:
- anyio backend selection (asyncio only)
- FakeGitHub instance with an httpx client routed to it
- GitHubService wired to the fake, with a controllable cache clock
"""

from __future__ import annotations

import httpx
import pytest

from insights.services.github import GitHubService, ResponseCache
from tests.helpers.github_fakes import TOKEN, FakeClock, FakeGitHub


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def github_client(fake_github: FakeGitHub) -> httpx.AsyncClient:
    # MockTransport holds no sockets, so the client needs no closing
    return fake_github.client()


@pytest.fixture
def github_service(github_client: httpx.AsyncClient, clock: FakeClock) -> GitHubService:
    return GitHubService(
        TOKEN,
        "octo",
        cache=ResponseCache(timer=clock),
        client=github_client,
    )
