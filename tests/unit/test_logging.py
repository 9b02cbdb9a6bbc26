"""Unit tests for structured logging setup."""

import logging

import structlog

from loan_gateway.core.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_sets_root_level(self):
        setup_logging(log_level="debug", log_format="console")

        assert logging.getLogger().level == logging.DEBUG
        assert structlog.is_configured()

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="chatty", log_format="json")

        assert logging.getLogger().level == logging.INFO
