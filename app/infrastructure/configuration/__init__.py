"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the locale
demo application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Supported locales and translation bundle settings
    ServerSettings: HTTP and locale cookie settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    supported = settings.i18n.supported_locales
    cookie_name = settings.server.LOCALE_COOKIE_NAME

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings

__all__ = ["Settings", "I18nSettings", "ServerSettings"]
