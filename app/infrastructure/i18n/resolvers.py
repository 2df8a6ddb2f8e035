"""Locale resolution logic for determining user's preferred language.

Provides strategies for resolving the appropriate locale from the stored
locale cookie, the browser's Accept-Language header and the configured
default.
"""

from typing import Optional, Sequence

import structlog

from infrastructure.i18n.models import Locale

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Resolves the active locale for a request.

    Implements fallback chain for determining preferred locale:
    1. Locale cookie (if it names a supported locale)
    2. Browser preferred language (if supported)
    3. First supported locale
    """

    def __init__(self, supported_locales: Sequence[Locale]):
        """Initialize locale resolver.

        Args:
            supported_locales: Supported locales; the first one is the default.

        Raises:
            ValueError: If supported_locales is empty.
        """
        if not supported_locales:
            raise ValueError("At least one supported locale is required")
        self.supported_locales = list(supported_locales)
        self.log = logger.bind(default_locale=self.default_locale.tag)

    @property
    def default_locale(self) -> Locale:
        return self.supported_locales[0]

    def resolve(
        self,
        cookie_value: Optional[str],
        browser_preferred: Optional[Locale],
    ) -> Locale:
        """Pick the active locale from the cookie, browser and default.

        Args:
            cookie_value: Raw value of the locale cookie, if any.
            browser_preferred: Browser's preferred locale, if any.

        Returns:
            Resolved Locale. Never raises for request inputs.
        """
        from_cookie = self.resolve_from_cookie(cookie_value)
        if from_cookie is not None:
            self.log.debug("locale_resolved", locale=from_cookie.tag, source="cookie")
            return from_cookie

        if browser_preferred is not None:
            match = match_supported(browser_preferred, self.supported_locales)
            if match is not None:
                self.log.debug("locale_resolved", locale=match.tag, source="browser")
                return match

        self.log.debug(
            "locale_resolved", locale=self.default_locale.tag, source="default"
        )
        return self.default_locale

    def resolve_from_cookie(self, cookie_value: Optional[str]) -> Optional[Locale]:
        """Parse the cookie value and accept it only if exactly supported.

        Args:
            cookie_value: Raw cookie value.

        Returns:
            Supported Locale, or None for absent, malformed or unsupported values.
        """
        if not cookie_value:
            return None

        try:
            locale = Locale.from_string(cookie_value)
        except ValueError:
            self.log.info("ignored_malformed_locale_cookie", cookie_value=cookie_value)
            return None

        if locale not in self.supported_locales:
            self.log.info("ignored_unsupported_locale_cookie", locale=locale.tag)
            return None

        return locale

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from an HTTP Accept-Language header alone.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale, or default if none match.
        """
        return self.resolve(None, preferred_from_header(accept_language))

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate a locale string against the supported locales.

        Args:
            locale_str: Locale string (e.g., "en", "fi").

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If locale_str is malformed or not supported.
        """
        try:
            locale = Locale.from_string(locale_str)
        except ValueError:
            log = self.log.bind(locale_str=locale_str)
            log.warning("invalid_locale_string")
            raise

        if locale not in self.supported_locales:
            log = self.log.bind(locale=locale.tag)
            log.warning("unsupported_locale_string")
            raise ValueError(f"Unsupported locale: {locale.tag}")

        return locale


def _parse_quality(params: str) -> Optional[float]:
    """Quality from the range parameters; None when it is not a number in 0..1."""
    name, _, value = params.partition("=")
    if name.strip() != "q":
        return 1.0
    try:
        quality = float(value)
    except ValueError:
        return None
    # NaN fails both comparisons
    if not 0.0 <= quality <= 1.0:
        return None
    return quality


def parse_accept_language(accept_language: Optional[str]) -> list[tuple[str, float]]:
    """Split an Accept-Language header into (range, quality) pairs.

    "fi-FI,fi;q=0.9,en;q=0.8" -> [("fi-FI", 1.0), ("fi", 0.9), ("en", 0.8)]

    Pairs are sorted by quality, highest first; ties keep header order.
    Ranges whose quality is not a number between 0 and 1 are dropped.
    """
    preferences = []
    for part in (accept_language or "").split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range:
            continue

        quality = _parse_quality(params)
        if quality is None:
            continue
        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda pref: pref[1], reverse=True)


def preferred_from_header(accept_language: Optional[str]) -> Optional[Locale]:
    """Return the browser's preferred locale from Accept-Language.

    Skips the "*" wildcard, zero-quality ranges and malformed tags.

    Args:
        accept_language: Accept-Language header value.

    Returns:
        Highest-quality parseable Locale, or None.
    """
    for lang_range, quality in parse_accept_language(accept_language):
        if lang_range == "*" or quality <= 0:
            continue
        try:
            return Locale.from_string(lang_range)
        except ValueError:
            continue
    return None


def match_supported(
    requested: Locale, supported: Sequence[Locale]
) -> Optional[Locale]:
    """Find the supported locale serving ``requested``.

    An exact tag match wins; otherwise the first supported locale with the
    same language is used, so "fi-FI" is served by "fi" and "en" by "en-GB".
    """
    if requested in supported:
        return requested
    for locale in supported:
        if locale.language == requested.language:
            return locale
    return None


def resolve_locale(
    cookie_value: Optional[str],
    browser_preferred: Optional[Locale],
    supported_locales: Sequence[Locale],
) -> Locale:
    """Resolve the active locale without keeping a resolver around.

    Raises:
        ValueError: If supported_locales is empty.
    """
    return LocaleResolver(supported_locales).resolve(cookie_value, browser_preferred)
