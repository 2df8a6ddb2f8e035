"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslationServiceDep,
    LocaleResolverDep,
    LocaleCookieDep,
    GreetServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
    get_locale_resolver,
    get_locale_cookie,
    get_greet_service,
)

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "LocaleResolverDep",
    "LocaleCookieDep",
    "GreetServiceDep",
    "get_settings",
    "get_translation_service",
    "get_locale_resolver",
    "get_locale_cookie",
    "get_greet_service",
]
