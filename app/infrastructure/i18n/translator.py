"""Translation service for retrieving and interpolating translated messages.

Lookups never raise: a key missing everywhere is returned as-is so that an
untranslated label stays visible instead of breaking the page.
"""

import re
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence

import structlog

from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger().bind(component="i18n.translator")

_POSITIONAL_PATTERN = re.compile(r"\{(\d+)\}")


class Translator:
    """Service for translating messages with positional argument substitution.

    Built from catalogs that are already loaded (see ``create_translator``)
    and read-only afterwards, so one instance is shared by every request.

    Attributes:
        catalogs: Read-only mapping of Locale to its TranslationCatalog.
        base_catalog: Catalog with messages shared by every locale.
    """

    def __init__(
        self,
        catalogs: Mapping[Locale, TranslationCatalog],
        base_catalog: Optional[TranslationCatalog] = None,
    ):
        """Initialize Translator.

        Args:
            catalogs: Loaded catalogs by locale; copied on construction.
            base_catalog: Base bundle catalog; empty when omitted.
        """
        self.catalogs: Mapping[Locale, TranslationCatalog] = MappingProxyType(
            dict(catalogs)
        )
        self.base_catalog = base_catalog or TranslationCatalog(locale=None)
        logger.info(
            "initialized_translator",
            locales=[locale.tag for locale in self.catalogs],
        )

    def translate_message(
        self,
        key: str,
        locale: Locale,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        """Retrieve a translated message and substitute positional arguments.

        Lookup order: exact locale bundle, language-only bundle (when the
        locale has a region), base bundle, then the key itself.

        Args:
            key: Translation key (e.g., "yourName").
            locale: Locale to translate to.
            args: Values for {0}, {1}, ... placeholders.

        Returns:
            Translated message string, or the key when no bundle has it.
        """
        message = self._lookup(key, locale)

        if message is None:
            logger.warning("translation_not_found", key=key, locale=locale.tag)
            return key

        return self._interpolate(message, list(args or []), key)

    def has_message(self, key: str, locale: Locale) -> bool:
        """Check if translation exists for key in the locale's own bundle.

        Args:
            key: Translation key to check.
            locale: Locale to check.

        Returns:
            True if message exists in requested locale, False otherwise.
        """
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> List[Locale]:
        """Get list of loaded locales.

        Returns:
            List of Locales that have been loaded.
        """
        return list(self.catalogs.keys())

    def _lookup(self, key: str, locale: Locale) -> Optional[str]:
        candidates = [locale]
        if locale.language != locale.tag:
            candidates.append(Locale(locale.language))

        for candidate in candidates:
            catalog = self.catalogs.get(candidate)
            message = catalog.get_message(key) if catalog else None
            if message is not None:
                return message

        message = self.base_catalog.get_message(key)
        if message is not None:
            logger.debug("used_base_translation", key=key, locale=locale.tag)
        return message

    def _interpolate(self, message: str, args: list, key: str) -> str:
        """Replace {0}, {1}, ... with the matching positional argument.

        Placeholders without a matching argument are left in place.
        """

        def _replace(match: "re.Match[str]") -> str:
            index = int(match.group(1))
            if index < len(args):
                return str(args[index])
            logger.warning(
                "missing_interpolation_argument",
                key=key,
                index=index,
                argument_count=len(args),
            )
            return match.group(0)

        return _POSITIONAL_PATTERN.sub(_replace, message)
