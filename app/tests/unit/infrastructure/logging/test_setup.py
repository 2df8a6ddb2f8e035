"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger context binding
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "exception")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_without_settings(self):
        """Test environment short-circuits before settings are loaded."""
        assert configure_logging() is not None

    def test_configure_logging_idempotent(self, mock_settings):
        configure_logging(settings=mock_settings)
        configure_logging(settings=mock_settings)

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_get_module_logger_binds_component(self):
        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_methods_dont_raise(self):
        logger = get_module_logger()

        logger.debug("debug_event", key="value")
        logger.info("info_event", key="value")
        logger.warning("warning_event", key="value")
        logger.error("error_event", key="value")

    def test_exception_logging(self):
        logger = get_module_logger()

        try:
            raise ValueError("test")
        except ValueError:
            logger.exception("error_occurred")
