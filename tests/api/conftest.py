"""API test fixtures.

Builds on root conftest fixtures (fake_github, github_service).

api_client talks to the FastAPI app in-process, with get_github_service
overridden to return the service wired to FakeGitHub.
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from insights.services.github import GitHubService


@pytest.fixture
async def api_client(github_service: GitHubService):
    """HTTP client whose GitHub dependency is the fake-backed service."""
    from insights.api.deps import get_github_service
    from insights.main import app

    app.dependency_overrides[get_github_service] = lambda: github_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
