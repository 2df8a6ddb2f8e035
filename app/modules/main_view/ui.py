"""Per-request UI state.

Holds the active locale and notifies registered listeners when it changes.
Also collects the notifications and the reload request produced while
handling an event, so the HTTP layer can send them back to the browser.
"""

from dataclasses import dataclass
from typing import Callable, List

from infrastructure.i18n import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class LocaleChangeEvent:
    ui: "UI"
    locale: Locale


LocaleChangeListener = Callable[[LocaleChangeEvent], None]


class UI:
    def __init__(self, locale: Locale):
        self._locale = locale
        self._listeners: List[LocaleChangeListener] = []
        self.notifications: List[str] = []
        self.reload_requested = False

    @property
    def locale(self) -> Locale:
        return self._locale

    def set_locale(self, locale: Locale) -> None:
        """Change the locale and notify listeners.

        A failing listener is logged and skipped; the remaining listeners
        still run and the new locale stays in effect.
        """
        if locale == self._locale:
            return

        previous = self._locale
        self._locale = locale
        logger.info("ui_locale_changed", previous=previous.tag, locale=locale.tag)

        event = LocaleChangeEvent(ui=self, locale=locale)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:  # pylint: disable=broad-except
                logger.exception("locale_change_listener_failed", locale=locale.tag)

    def add_locale_change_listener(
        self, listener: LocaleChangeListener
    ) -> Callable[[], None]:
        """Register a listener.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def show_notification(self, text: str) -> None:
        self.notifications.append(text)

    def reload(self) -> None:
        self.reload_requested = True
