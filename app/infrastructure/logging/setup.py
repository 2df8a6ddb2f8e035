"""Structlog configuration.

``configure_logging`` is called once by the application lifespan (and by the
test conftest). Development renders colored console output; production emits
one JSON object per line.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("locale_resolved", locale="fi", source="cookie")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    clip_user_input,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "locale-demo"

# Above CRITICAL: nothing reaches the handlers
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(settings: "Settings", prod_mode: bool) -> List[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_info(APP_NAME, settings.GIT_SHA, settings.PREFIX),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        clip_user_input(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def _configure_silent() -> BoundLogger:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    logging.root.setLevel(SILENT_LEVEL)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional["Settings"] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Under pytest all output is suppressed and settings are not read.

    Args:
        log_level: Overrides ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production`` (JSON vs console).
        settings: Settings to use; defaults to the cached application settings.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        return _configure_silent()

    if settings is None:
        # Imported here: the provider module imports code that logs
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last part of the module name) and ``module_path``.
    For ``modules.greeting.service`` that is ``component="service"``.
    """
    logger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    caller = current_frame.f_back if current_frame else None
    module_name = caller.f_globals.get("__name__") if caller else None
    if not module_name:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
