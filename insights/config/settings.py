from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub - personal access token (empty = unauthenticated, 60 req/hour)
    github_token: str = ""
    # Default user for activity/contribution/stats lookups when none is given
    github_username: str | None = None
    github_api_url: str = "https://api.github.com"
    github_user_agent: str = "GitHub-Integration-Service"

    # HTTP timeouts (seconds)
    github_timeout_seconds: float = 30.0
    github_connect_timeout_seconds: float = 5.0

    # In-memory response cache capacity (entries across all aggregates)
    cache_max_entries: int = 1000

    # Application
    debug: bool = False
    log_level: str = "INFO"

    @property
    def authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


settings = Settings()
