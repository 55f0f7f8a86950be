"""
Configuration package for the Travel Favorites BFF.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    TranslationProviderSettings,
    PlacesProviderSettings,
    AuthSettings,
    StoreSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "TranslationProviderSettings",
    "PlacesProviderSettings",
    "AuthSettings",
    "StoreSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
