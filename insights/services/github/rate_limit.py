"""
Rate limit tracking for GitHub API calls.

Keeps the last quota GitHub reported so the UI can display it. Nothing here
throttles or queues requests.
"""

import logging

from insights.services.github.constants import (
    AUTHENTICATED_RATE_LIMIT,
    UNAUTHENTICATED_RATE_LIMIT,
)
from insights.services.github.helpers import RateLimitInfo
from insights.services.github.types import RateLimitSnapshot

logger = logging.getLogger(__name__)

# Warn once remaining quota drops to this level
LOW_QUOTA_THRESHOLD = 10


class RateLimitTracker:
    """Remaining quota and reset time, updated from every response."""

    def __init__(self, authenticated: bool) -> None:
        self.limit = AUTHENTICATED_RATE_LIMIT if authenticated else UNAUTHENTICATED_RATE_LIMIT
        self.remaining = UNAUTHENTICATED_RATE_LIMIT
        self.reset_at = 0  # epoch milliseconds

    def update(self, rate_info: RateLimitInfo) -> None:
        """Apply rate limit headers; missing or malformed values are ignored."""
        remaining = rate_info.remaining_count
        reset = rate_info.reset_timestamp

        if remaining is not None:
            self.remaining = remaining
            if remaining <= LOW_QUOTA_THRESHOLD:
                logger.warning(f"GitHub rate limit low: {remaining}/{self.limit} remaining")
        if reset is not None:
            self.reset_at = reset * 1000

    def info(self) -> RateLimitSnapshot:
        return RateLimitSnapshot(remaining=self.remaining, reset=self.reset_at, limit=self.limit)
