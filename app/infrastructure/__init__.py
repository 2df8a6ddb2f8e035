"""Infrastructure modules for the locale demo application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, ServerSettings)
- i18n: Locale model, translation bundles, locale resolution and cookie
- logging: structlog configuration and request context binding
- services: Dependency injection providers (SettingsDep, TranslationServiceDep)
"""
