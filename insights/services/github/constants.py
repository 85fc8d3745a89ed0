"""Constants for GitHub service."""

GITHUB_API_URL = "https://api.github.com"
GITHUB_WEB_URL = "https://github.com"

# v3 media type, pinned so payload shapes stay stable
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"
DEFAULT_USER_AGENT = "GitHub-Integration-Service"

# Hourly quota GitHub grants with and without a token
AUTHENTICATED_RATE_LIMIT = 5000
UNAUTHENTICATED_RATE_LIMIT = 60

# Cache TTLs per aggregate (minutes)
REPO_DATA_TTL_MINUTES = 60
USER_ACTIVITY_TTL_MINUTES = 30
CONTRIBUTIONS_TTL_MINUTES = 120
STATS_TTL_MINUTES = 60

# Page sizes requested from the REST API
REPO_COMMITS_PER_PAGE = 100
REPO_CONTRIBUTORS_PER_PAGE = 100
REPO_RELEASES_PER_PAGE = 20
ACTIVITY_EVENTS_PER_PAGE = 100
STARRED_PER_PAGE = 50
CONTRIBUTION_EVENTS_PER_PAGE = 300
USER_REPOS_PER_PAGE = 100

# Activity feed limits
COMMITS_PER_PUSH = 3
MAX_RECENT_COMMITS = 20
MAX_PULL_REQUESTS = 20
MAX_ISSUES = 20
MAX_ACTIVITY_ITEMS = 50

# Contribution calendar
CONTRIBUTION_WINDOW_DAYS = 365
# Upper bound (inclusive) of each non-zero level: 1-3 -> 1, 4-6 -> 2, 7-9 -> 3
CONTRIBUTION_LEVEL_THRESHOLDS: tuple[int, ...] = (3, 6, 9)

# Statistics
MAX_TOP_REPOSITORIES = 10
MAX_RECENT_REPOSITORIES = 10
# Placeholder commits-per-repo used for the commit estimate; exact totals
# would need one request per repository
ESTIMATED_COMMITS_PER_REPO = 15

DEFAULT_LANGUAGE_COLOR = "#8b949e"

# Standard GitHub language colors (subset of most common)
GITHUB_LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#2b7489",
    "Python": "#3572A5",
    "Java": "#b07219",
    "C++": "#f34b7d",
    "C#": "#239120",
    "PHP": "#4F5D95",
    "Ruby": "#701516",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Swift": "#ffac45",
    "Kotlin": "#F18E33",
    "Dart": "#00B4AB",
    "HTML": "#e34c26",
    "CSS": "#1572B6",
    "Vue": "#4FC08D",
    "React": "#61DAFB",
    "Angular": "#DD0031",
    "Shell": "#89e051",
    "PowerShell": "#012456",
    "Dockerfile": "#384d54",
    "YAML": "#cb171e",
    "JSON": "#292929",
    "Markdown": "#083fa1",
}
