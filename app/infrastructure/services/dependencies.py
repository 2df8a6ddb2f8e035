"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleCookie, LocaleResolver, TranslationService
from infrastructure.services.providers import (
    get_greet_service,
    get_locale_cookie,
    get_locale_resolver,
    get_settings,
    get_translation_service,
)
from modules.greeting import GreetService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Shared, read-only translation service
TranslationServiceDep = Annotated[
    TranslationService, Depends(get_translation_service)
]

# Locale resolution over the configured supported locales
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Locale cookie reader/writer
LocaleCookieDep = Annotated[LocaleCookie, Depends(get_locale_cookie)]

# Greeting service used by the greet button
GreetServiceDep = Annotated[GreetService, Depends(get_greet_service)]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "LocaleResolverDep",
    "LocaleCookieDep",
    "GreetServiceDep",
]
