"""
Configuration Module

Application configuration settings.
"""

from bakery.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
