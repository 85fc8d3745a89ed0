"""
GitHub API helper utilities.

Provides rate limit header parsing, error response processing and the
fail-fast concurrent fetch used by every aggregate operation.
"""

import asyncio
import logging
from collections.abc import Coroutine
from datetime import UTC, datetime
from typing import Any

import httpx

from insights.services.github.exceptions import GitHubAPIError

logger = logging.getLogger(__name__)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_github_datetime(value: str) -> datetime:
    """Parse a GitHub ISO 8601 timestamp ("2024-05-01T12:00:00Z") as aware UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def remaining_count(self) -> int | None:
        """Get remaining quota as integer, or None if missing or malformed."""
        return _parse_int(self.remaining)

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if missing or malformed."""
        return _parse_int(self.reset)

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining_count == 0


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise for any non-2xx response from GitHub API.

    Args:
        response: The HTTP response from GitHub API
        resource: API path for error context (e.g. "/repos/owner/repo")

    Raises:
        GitHubAPIError: With the status code and status text of the response
    """
    if response.is_success:
        return

    status_text = response.reason_phrase
    rate_info = RateLimitInfo(response)

    if response.status_code in (403, 429) and rate_info.is_exhausted:
        raise GitHubAPIError(
            "GitHub API rate limit exceeded",
            response.status_code,
            status_text,
            rate_limit_reset=rate_info.reset_timestamp,
        )

    logger.debug(f"GitHub returned {response.status_code} for {resource}")
    raise GitHubAPIError(
        f"GitHub API Error: {response.status_code} {status_text}",
        response.status_code,
        status_text,
    )


async def fetch_all(*coros: Coroutine[Any, Any, Any]) -> list[Any]:
    """
    Await several requests concurrently, failing fast.

    Results come back in argument order. The first failure cancels the
    requests still in flight and is re-raised as-is, so callers can handle
    GitHubAPIError directly.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except Exception:
        for task in tasks:
            task.cancel()
        # Let cancelled requests unwind before propagating
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
