"""Translation loading interface and implementations.

Defines the contract for loading translations and provides YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger().bind(component="i18n.loader")


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for the base bundle and for each locale.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """

    @abstractmethod
    def load_base(self) -> TranslationCatalog:
        """Load the base bundle shared by every locale.

        Returns:
            TranslationCatalog with ``locale=None``.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for all locales that have a bundle.

        Returns:
            Dict mapping Locale to TranslationCatalog.
        """


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation bundles.

    Expects files named ``<bundle>.yml`` (base bundle) and
    ``<bundle>.<locale>.yml`` (one per locale) in the translations directory.
    Each file holds a flat ``key: text`` mapping; nested mappings are
    flattened into dotted keys.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        bundle_name: File name prefix of the bundle.
    """

    def __init__(
        self,
        translations_dir: Path,
        bundle_name: str = "labelsbundle",
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            bundle_name: File name prefix of the bundle files.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.bundle_name = bundle_name

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            bundle_name=bundle_name,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a locale from its YAML bundle.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no bundle file exists for locale.
            ValueError: If YAML parsing fails.
        """
        bundle_file = self.translations_dir / f"{self.bundle_name}.{locale.tag}.yml"
        if not bundle_file.exists():
            raise FileNotFoundError(
                f"No translation file found for locale {locale.tag} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        self._read_into(catalog, bundle_file)

        logger.info(
            "loaded_translations",
            locale=locale.tag,
            file=bundle_file.name,
            message_count=len(catalog.messages),
        )

        return catalog

    def load_base(self) -> TranslationCatalog:
        """Load the base bundle.

        A missing base file yields an empty catalog; lookups then fall back
        to the raw key.

        Returns:
            Base TranslationCatalog.

        Raises:
            ValueError: If YAML parsing fails.
        """
        catalog = TranslationCatalog(locale=None)
        base_file = self.translations_dir / f"{self.bundle_name}.yml"

        if not base_file.exists():
            logger.warning("base_bundle_missing", file=str(base_file))
            return catalog

        self._read_into(catalog, base_file)
        logger.info(
            "loaded_base_translations",
            file=base_file.name,
            message_count=len(catalog.messages),
        )
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every locale that has a bundle file.

        Detects available locales from ``<bundle>.<locale>.yml`` file names.

        Returns:
            Dict mapping each Locale to its TranslationCatalog.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob(f"{self.bundle_name}.*.yml"):
            # "labelsbundle.fi.yml" -> "fi"
            locale_str = yaml_file.stem[len(self.bundle_name) + 1 :]
            try:
                locales_found.add(Locale.from_string(locale_str))
            except ValueError:
                logger.warning("skipped_unrecognized_bundle", file=yaml_file.name)

        result = {}
        for locale in sorted(locales_found, key=lambda loc: loc.tag):
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale.tag)

        return result

    def _read_into(self, catalog: TranslationCatalog, source_file: Path) -> None:
        try:
            with open(source_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(source_file), error=str(e))
            raise ValueError(f"Failed to parse {source_file}: {e}") from e

        if data is None:
            return

        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        self._merge_yaml_data(catalog, data, source_file)
        catalog.loaded_at = datetime.now(timezone.utc).isoformat()

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Dict[str, Any],
        source_file: Path,
        prefix: str = "",
    ) -> None:
        """Merge YAML data into catalog.

        Expected format:
        key1: message1
        section:
          key2: message2   # stored as "section.key2"

        Args:
            catalog: TranslationCatalog to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
            prefix: Dotted prefix for nested sections.
        """
        for key, value in data.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                self._merge_yaml_data(catalog, value, source_file, f"{full_key}.")
            elif value is None or isinstance(value, list):
                logger.warning(
                    "invalid_message_format",
                    file=source_file.name,
                    key=full_key,
                    expected="scalar",
                )
            else:
                catalog.set_message(full_key, str(value))
