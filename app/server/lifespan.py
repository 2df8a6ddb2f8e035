from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_locale_resolver,
    get_settings,
    get_translation_service,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_translations(
    app: FastAPI,
    settings: "Settings",
    logger: BoundLogger,
) -> None:
    """Load translation bundles once and check them against supported locales.

    A supported locale without its own bundle still works through the base
    bundle, so it is only reported.
    """
    try:
        translation_service = get_translation_service()
        resolver = get_locale_resolver()
    except Exception as exc:
        logger.error("translations_loading_failed", error=str(exc))
        raise

    available = set(translation_service.get_available_locales())
    missing = [
        locale.tag for locale in resolver.supported_locales if locale not in available
    ]
    if missing:
        logger.warning("supported_locales_without_bundle", locales=missing)

    app.state.translation_service = translation_service
    app.state.locale_resolver = resolver
    logger.info(
        "translations_loaded",
        supported_locales=[locale.tag for locale in resolver.supported_locales],
        default_locale=resolver.default_locale.tag,
        translations_dir=str(settings.i18n.translations_dir),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _load_translations(app, settings, logger)

    yield

    logger.info("application_shutdown")
