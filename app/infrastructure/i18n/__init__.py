"""i18n system - internationalization and localization framework.

Provides translation management, locale resolution, and locale cookie
persistence for the application.

Main components:
- models: Locale, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator with base-bundle fallback and positional arguments
- resolvers: LocaleResolver and Accept-Language matching
- cookies: LocaleCookie for persisting the chosen locale
"""

from infrastructure.i18n.cookies import LocaleCookie, ResponseCookieStore
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog
from infrastructure.i18n.resolvers import (
    LocaleResolver,
    match_supported,
    preferred_from_header,
    resolve_locale,
)
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator

__all__ = [
    "Locale",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "TranslationService",
    "LocaleResolver",
    "match_supported",
    "preferred_from_header",
    "resolve_locale",
    "LocaleCookie",
    "ResponseCookieStore",
]
