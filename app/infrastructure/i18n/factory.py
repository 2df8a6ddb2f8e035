"""Builds the application Translator from a bundle directory."""

from pathlib import Path
from typing import Dict, Iterable, Optional

import structlog

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger().bind(component="i18n.factory")

DEFAULT_BUNDLE_NAME = "labelsbundle"


def default_translations_dir() -> Path:
    # .../app/infrastructure/i18n/factory.py -> .../app/locales
    return Path(__file__).resolve().parents[2] / "locales"


def _load_catalogs(
    loader: TranslationLoader, locales: Iterable[Locale]
) -> Dict[Locale, TranslationCatalog]:
    catalogs = {}
    for locale in locales:
        try:
            catalogs[locale] = loader.load(locale)
        except FileNotFoundError:
            logger.warning("bundle_missing_for_locale", locale=locale.tag)
    return catalogs


def create_translator(
    translations_dir: Optional[Path] = None,
    bundle_name: str = DEFAULT_BUNDLE_NAME,
    locales: Optional[Iterable[Locale]] = None,
) -> Translator:
    """Load the YAML bundles in ``translations_dir`` into a Translator.

    With ``locales`` only those bundles are loaded; a locale without a
    bundle is logged and served from the base bundle. Without it every
    ``<bundle>.<tag>.yml`` found in the directory is loaded. Everything is
    read here, once; the returned Translator never touches the files again.

    Raises:
        ValueError: If the translations directory does not exist or a
            bundle is not valid YAML.

    Example:
        translator = create_translator(locales=[Locale("en"), Locale("fi")])
        translator.translate_message("helloName", Locale("fi"), ["Ada"])
    """
    directory = translations_dir or default_translations_dir()
    loader = YAMLTranslationLoader(directory, bundle_name=bundle_name)

    base_catalog = loader.load_base()
    if locales is None:
        catalogs = loader.load_all()
    else:
        catalogs = _load_catalogs(loader, locales)

    translator = Translator(catalogs, base_catalog)
    logger.info(
        "translator_created",
        translations_dir=str(directory),
        bundle_name=bundle_name,
        locales=[locale.tag for locale in translator.get_available_locales()],
    )
    return translator
