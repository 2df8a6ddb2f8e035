"""Internationalization infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings
from infrastructure.i18n.factory import default_translations_dir
from infrastructure.i18n.models import Locale


class I18nSettings(InfrastructureSettings):
    """Supported locales and translation bundle configuration.

    The order of SUPPORTED_LOCALES matters: the first entry is the default
    locale used when neither the cookie nor the browser yields a match.

    Environment Variables:
        SUPPORTED_LOCALES: Comma separated language tags (default: en,fi)
        TRANSLATIONS_DIR: Directory holding the YAML bundles (default: app/locales)
        BUNDLE_NAME: File name prefix of the bundles (default: labelsbundle)

    Example:
        ```python
        from infrastructure.services import get_settings

        locales = get_settings().i18n.supported_locales
        # [Locale("en"), Locale("fi")]
        ```
    """

    SUPPORTED_LOCALES: str = Field(default="en,fi", alias="SUPPORTED_LOCALES")
    TRANSLATIONS_DIR: Optional[Path] = Field(default=None, alias="TRANSLATIONS_DIR")
    BUNDLE_NAME: str = Field(default="labelsbundle", alias="BUNDLE_NAME")

    @field_validator("SUPPORTED_LOCALES")
    @classmethod
    def validate_supported_locales(cls, v: str) -> str:
        """Ensure at least one well-formed locale is configured."""
        tags = [part.strip() for part in v.split(",") if part.strip()]
        if not tags:
            raise ValueError("SUPPORTED_LOCALES must list at least one locale")
        # Raises ValueError on malformed tags
        return ",".join(Locale.from_string(tag).tag for tag in tags)

    @property
    def supported_locales(self) -> list[Locale]:
        """Supported locales in configured order, without duplicates."""
        locales: list[Locale] = []
        for tag in self.SUPPORTED_LOCALES.split(","):
            locale = Locale.from_string(tag)
            if locale not in locales:
                locales.append(locale)
        return locales

    @property
    def translations_dir(self) -> Path:
        """Directory with translation bundles, defaulting to app/locales."""
        if self.TRANSLATIONS_DIR is not None:
            return self.TRANSLATIONS_DIR
        return default_translations_dir()
