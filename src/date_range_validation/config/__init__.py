"""Configuration management for date range validation.

Settings are loaded from DRV_-prefixed environment variables and validated with
Pydantic BaseSettings.

Usage:
    >>> from date_range_validation.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.format_scope)
"""

from date_range_validation.config.settings import TODAY, Settings, get_settings

__all__ = [
    "Settings",
    "TODAY",
    "get_settings",
]
