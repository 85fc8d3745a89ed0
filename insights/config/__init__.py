"""Configuration package."""

from insights.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
