"""
Configuration package for the Translation Bookmarks API.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    PaginationSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "PaginationSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
