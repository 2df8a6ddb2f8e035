"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

# language[-Script][-REGION], e.g. "en", "fi-FI", "zh-Hant-TW"
_TAG_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)


@dataclass(frozen=True)
class Locale:
    """Language tag identifying the active language.

    Uses IETF BCP 47 language tag format (e.g., en, fi-FI). Frozen so that
    two locales with the same tag compare and hash equal.

    Attributes:
        tag: Normalized language tag (language lower case, region upper case).
    """

    tag: str

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse and normalize a language tag.

        Accepts "_" as separator for compatibility with POSIX style tags.

        Args:
            locale_str: Locale string (e.g., "en", "fi-FI", "EN_us").

        Returns:
            Locale with normalized tag.

        Raises:
            ValueError: If locale string is not a well-formed tag.
        """
        match = _TAG_PATTERN.match((locale_str or "").strip())
        if not match:
            raise ValueError(f"Malformed locale: {locale_str!r}")

        parts = [match.group("language").lower()]
        if match.group("script"):
            parts.append(match.group("script").title())
        if match.group("region"):
            parts.append(match.group("region").upper())
        return cls("-".join(parts))

    @property
    def language(self) -> str:
        """Get language part of locale (e.g., "fi" from "fi-FI").

        Returns:
            Language code.
        """
        return self.tag.split("-")[0]

    def __str__(self) -> str:
        return self.tag


@dataclass
class TranslationCatalog:
    """Container for translations of a single bundle.

    Stores flat key -> template mappings. A catalog with ``locale=None`` is
    the base bundle shared by all languages.

    Attributes:
        locale: The Locale this catalog is for, or None for the base bundle.
        messages: Flat dict {key: message_template}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Optional[Locale] = None
    messages: Dict[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a translation template by key.

        Args:
            key: Translation key (e.g., "yourName").

        Returns:
            Template string, or None if not found.
        """
        return self.messages.get(key)

    def set_message(self, key: str, message: str) -> None:
        """Set a translation template."""
        self.messages[key] = message

    def has_message(self, key: str) -> bool:
        """Check if translation exists for given key."""
        return key in self.messages
