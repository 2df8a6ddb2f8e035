"""Translation service injected into views and routes."""

from typing import Any, List, Optional, Sequence

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import Locale
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Facade over a loaded Translator.

    The argument order ``(locale, key, args)`` matches how views ask for
    labels. Instances are shared between requests and never mutated.

    Usage:
        @router.get("/label")
        def get_label(translation: TranslationServiceDep):
            return {"label": translation.translate(Locale("fi"), "yourName")}
    """

    def __init__(self, translator: Optional[Translator] = None):
        # Without a translator, every bundle in app/locales is loaded
        self._translator = translator or create_translator()

    @property
    def translator(self) -> Translator:
        return self._translator

    def translate(
        self,
        locale: Locale,
        key: str,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        """Translated text for ``key``, or the key itself when nothing matches.

        ``args`` fill the ``{0}``, ``{1}``, ... placeholders.
        """
        return self._translator.translate_message(key, locale, args)

    def has_message(self, key: str, locale: Locale) -> bool:
        return self._translator.has_message(key, locale)

    def get_available_locales(self) -> List[Locale]:
        return self._translator.get_available_locales()
