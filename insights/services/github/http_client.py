"""
HTTP access to the GitHub REST API.

Provides a singleton AsyncClient with connection pooling shared by every
GitHubService, plus GitHubHTTPClient, the authenticated request wrapper that
every aggregate goes through. The wrapper attaches auth headers, feeds
rate limit headers to the tracker and raises GitHubAPIError on non-2xx.
"""

import logging
from typing import Any

import httpx

from insights.config import settings
from insights.services.github.constants import (
    DEFAULT_USER_AGENT,
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
)
from insights.services.github.helpers import RateLimitInfo, handle_error_response
from insights.services.github.rate_limit import RateLimitTracker

logger = logging.getLogger(__name__)

# Shared by every GitHubService that was not handed its own client
_client: httpx.AsyncClient | None = None


def get_github_client() -> httpx.AsyncClient:
    """
    Return the pooled client used for GitHub requests, creating it on first use.

    Headers are sent per request, so one client serves every token. A closed
    client (after close_github_client) is replaced transparently.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                settings.github_timeout_seconds,
                connect=settings.github_connect_timeout_seconds,
            ),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            http2=True,
        )
        logger.debug(
            f"Opened GitHub client (timeout={settings.github_timeout_seconds}s, http2)"
        )
    return _client


async def close_github_client() -> None:
    """Close the pooled client; called from the app lifespan on shutdown."""
    global _client
    if _client is None or _client.is_closed:
        return
    await _client.aclose()
    _client = None
    logger.debug("GitHub client closed")


class GitHubHTTPClient:
    """Authenticated requests against the GitHub REST API."""

    def __init__(
        self,
        token: str,
        rate_limit: RateLimitTracker,
        client: httpx.AsyncClient | None = None,
        base_url: str = GITHUB_API_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.rate_limit = rate_limit
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Accept": GITHUB_ACCEPT_HEADER,
            "User-Agent": user_agent,
        }

    @property
    def client(self) -> httpx.AsyncClient:
        # Injected clients are owned by the caller; otherwise use the shared one
        return self._client or get_github_client()

    async def request(
        self,
        path: str,
        params: dict[str, str | int] | None = None,
        method: str = "GET",
    ) -> Any:
        """
        Issue a request and return the decoded JSON body.

        Args:
            path: API path starting with "/" (e.g. "/repos/octo/demo")
            params: Query string parameters
            method: HTTP method (default: "GET")

        Returns:
            Parsed JSON response

        Raises:
            GitHubAPIError: If GitHub responds with a non-2xx status
        """
        logger.debug(f"GitHub {method} {path} {params or ''}")
        response = await self.client.request(
            method,
            f"{self.base_url}{path}",
            headers=self._headers,
            params=params,
            # Renamed or transferred repositories answer 301 to the new location
            follow_redirects=True,
        )

        # Quota is tracked for failed responses too
        self.rate_limit.update(RateLimitInfo(response))
        handle_error_response(response, path)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()
