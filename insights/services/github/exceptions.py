"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_text: str = "",
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class UsernameRequiredError(ValueError):
    """No username was passed and the service has no default username."""

    def __init__(self) -> None:
        super().__init__("Username is required")


class GitHubAggregateError(Exception):
    """One of the requests behind an aggregate operation failed.

    Wraps the underlying error so callers see which operation failed
    (e.g. "Failed to fetch repository data: GitHub API Error: 404 Not Found")
    while keeping the original available as ``cause`` and ``__cause__``.
    """

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation}: {cause}")

    @property
    def status_code(self) -> int | None:
        """HTTP status of the underlying GitHub error, if there was one."""
        if isinstance(self.cause, GitHubAPIError):
            return self.cause.status_code
        return None
