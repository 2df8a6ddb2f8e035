"""Greeting service."""

from typing import Optional

from infrastructure.i18n import Locale, TranslationService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class GreetService:
    """Produces greetings in the requested locale.

    Blank names get the anonymous greeting; otherwise the name is passed
    as argument {0} of the ``helloName`` template.
    """

    def __init__(self, translation_service: TranslationService):
        self.translation_service = translation_service

    def greet(self, name: Optional[str], locale: Locale) -> str:
        if name is None or not name.strip():
            logger.info("greeted_anonymous_user", locale=locale.tag)
            return self.translation_service.translate(locale, "helloAnonymous")

        logger.info("greeted_user", locale=locale.tag)
        return self.translation_service.translate(locale, "helloName", [name.strip()])
