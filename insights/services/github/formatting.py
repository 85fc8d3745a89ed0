"""Display helpers for numbers, timestamps and language colors."""

from datetime import UTC, datetime

from insights.services.github.constants import DEFAULT_LANGUAGE_COLOR, GITHUB_LANGUAGE_COLORS
from insights.services.github.helpers import parse_github_datetime

# (seconds per unit, unit name), largest unit first
_TIME_UNITS: list[tuple[int, str]] = [
    (31_536_000, "years"),
    (2_592_000, "months"),
    (86_400, "days"),
    (3_600, "hours"),
    (60, "minutes"),
]


def format_number(num: int) -> str:
    """Compact count for display: 1234 -> "1.2K", 2500000 -> "2.5M"."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_relative_time(timestamp: str, now: datetime | None = None) -> str:
    """Human "time ago" for a GitHub timestamp ("just now", "3 days ago", ...)."""
    now = now or datetime.now(UTC)
    elapsed = int((now - parse_github_datetime(timestamp)).total_seconds())

    for unit_seconds, unit in _TIME_UNITS:
        if elapsed >= unit_seconds:
            return f"{elapsed // unit_seconds} {unit} ago"
    return "just now"


def get_language_color(language: str) -> str:
    """Hex color GitHub uses for a language, grey when unknown."""
    return GITHUB_LANGUAGE_COLORS.get(language, DEFAULT_LANGUAGE_COLOR)
