"""Structured logging for the application (structlog).

    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()          # once, at startup
    logger = get_module_logger()
    logger.info("translations_loaded", locale_count=2)
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
]
