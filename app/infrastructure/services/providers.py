"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    LocaleCookie,
    LocaleResolver,
    TranslationService,
)
from infrastructure.i18n.factory import create_translator
from modules.greeting import GreetService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    Bundles are loaded once here and never modified afterwards, so the
    same instance is shared by every request.

    Returns:
        TranslationService: Service backed by a preloaded Translator.
    """
    settings = get_settings()
    translator = create_translator(
        translations_dir=settings.i18n.translations_dir,
        bundle_name=settings.i18n.BUNDLE_NAME,
        locales=settings.i18n.supported_locales,
    )
    return TranslationService(translator=translator)


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Resolver over the configured supported locales.
    """
    return LocaleResolver(get_settings().i18n.supported_locales)


@lru_cache
def get_locale_cookie() -> LocaleCookie:
    """
    Get the locale cookie helper configured from server settings.

    Returns:
        LocaleCookie: Cookie reader/writer.
    """
    server = get_settings().server
    return LocaleCookie(
        name=server.LOCALE_COOKIE_NAME,
        max_age=server.LOCALE_COOKIE_MAX_AGE,
        secure=server.COOKIE_SECURE,
    )


@lru_cache
def get_greet_service() -> GreetService:
    """
    Get application-scoped greeting service singleton.

    Usage:
        @router.post("/greet")
        def greet(greet_service: GreetServiceDep):
            return greet_service.greet("Ada", locale)
    """
    return GreetService(translation_service=get_translation_service())
