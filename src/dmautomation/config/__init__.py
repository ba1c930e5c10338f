"""Configuration package.

Usage:
    from dmautomation.config import get_settings

    settings = get_settings()
    settings.poll_interval
"""

from .settings import AutomationSettings, configure, get_settings, reset_settings

__all__ = [
    "AutomationSettings",
    "get_settings",
    "configure",
    "reset_settings",
]
