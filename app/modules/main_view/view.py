"""Main view: language selector, name field and greeting button.

The view is built for one request with the locale picked by the resolver.
Selecting another language stores it in the locale cookie and updates every
translated label in place; clearing the cookie asks the browser to reload,
after which the resolver falls back to the browser language or the default.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence

from infrastructure.i18n import Locale, TranslationService
from infrastructure.logging import get_module_logger
from modules.greeting import GreetService
from modules.main_view.components import Button, Component, Select, Span, TextField
from modules.main_view.page import render_page
from modules.main_view.ui import UI, LocaleChangeEvent

logger = get_module_logger()

LOCALE_SAVED_MESSAGE = "Locale choice saved into cookie"


class LocalePreferenceStore(Protocol):
    def save(self, locale: Locale) -> None: ...

    def clear(self) -> None: ...


class MainView:
    """Form demonstrating locale resolution and live label translation.

    Attributes:
        ui: Request UI state holding the active locale.
        children: Components in render order.
        language_select: Select listing the supported locales.
        name_field: Text field for the user's name.
        greeting_button: Primary button producing a greeting notification.
    """

    def __init__(
        self,
        ui: UI,
        translation_service: TranslationService,
        greet_service: GreetService,
        supported_locales: Sequence[Locale],
        preference_store: LocalePreferenceStore,
        cookie_locale: Optional[str] = None,
    ):
        self.ui = ui
        self.translation_service = translation_service
        self.greet_service = greet_service
        self.preference_store = preference_store
        self.cookie_locale = cookie_locale
        self.children: List[Component] = []

        # Informational only: the resolver has already applied the cookie
        if not cookie_locale:
            self.add(Span("noCookieInfo", "No stored language preference found."))
            self.add(
                Span(
                    "defaultInfo",
                    "Defaulting to browser locale (if supported) or English.",
                )
            )
        else:
            self.add(Span("cookieInfo", f"Locale was found from cookie: {cookie_locale}"))
            self.add(
                Button(
                    "clearCookieButton",
                    "[Clear language cookie and refresh page]",
                    action="clear-locale",
                )
            )

        # Language names come from the base bundle, shared by all languages
        self.language_select: Select[Locale] = Select(
            "languageSelect",
            label=self.get_translation("selectLanguage"),
            items=supported_locales,
            item_label_generator=lambda locale: self.get_translation(locale.language),
            item_value_generator=lambda locale: locale.tag,
            value=ui.locale,
        )
        self.add(self.language_select)

        self.add(
            Span(
                "selectionInfo",
                "When you select a new language, your choice will be saved "
                "and re-used if you reload the page.",
            )
        )

        self.name_field = TextField("nameField", label=self.get_translation("yourName"))
        self.add(self.name_field)

        self.greeting_button = Button(
            "greetingButton",
            self.get_translation("helloButton"),
            action="greet",
            theme_variants=["primary"],
            click_shortcut="Enter",
        )
        self.add(self.greeting_button)

        ui.add_locale_change_listener(self.locale_change)
        logger.debug(
            "main_view_created",
            locale=ui.locale.tag,
            cookie_locale=cookie_locale,
        )

    def add(self, component: Component) -> None:
        self.children.append(component)

    @property
    def locale(self) -> Locale:
        return self.ui.locale

    def get_translation(self, key: str, *args: Any) -> str:
        return self.translation_service.translate(self.ui.locale, key, list(args))

    def select_locale(self, locale: Locale) -> None:
        """Persist the chosen locale and switch the view to it.

        Order: write cookie, update locale (listeners re-translate labels),
        then queue the confirmation notification.
        """
        self.preference_store.save(locale)
        self.ui.set_locale(locale)
        self.language_select.value = locale
        self.ui.show_notification(LOCALE_SAVED_MESSAGE)

    def clear_locale_preference(self) -> None:
        """Delete the locale cookie and request a full page reload."""
        self.preference_store.clear()
        self.ui.reload()

    def greet(self, name: Optional[str]) -> str:
        self.name_field.value = name or ""
        greeting = self.greet_service.greet(name, self.ui.locale)
        self.ui.show_notification(greeting)
        return greeting

    def locale_change(self, event: LocaleChangeEvent) -> None:
        """Re-translate every locale dependent label."""
        self.greeting_button.text = self.get_translation("helloButton")
        self.name_field.label = self.get_translation("yourName")
        self.language_select.label = self.get_translation("selectLanguage")
        logger.debug("main_view_labels_updated", locale=event.locale.tag)

    def labels(self) -> Dict[str, str]:
        """Current text of every translated label, keyed by element id."""
        return {
            f"{self.language_select.element_id}-label": self.language_select.label,
            f"{self.name_field.element_id}-label": self.name_field.label,
            self.greeting_button.element_id: self.greeting_button.text,
        }

    def render(self) -> str:
        return render_page(self)
