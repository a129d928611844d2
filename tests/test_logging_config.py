"""Tests for logging_config: levels and logger naming."""

import logging

import pytest
from rich.logging import RichHandler

from loc_analyzer.logging_config import get_logger, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_level(self, verbose, quiet, level):
        logger = setup_logging(verbose=verbose, quiet=quiet)
        assert logger.name == "loc_analyzer"
        assert logger.level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


class TestGetLogger:
    def test_default_is_package_logger(self):
        assert get_logger().name == "loc_analyzer"

    def test_module_name_kept(self):
        assert get_logger("loc_analyzer.aggregator").name == "loc_analyzer.aggregator"

    def test_foreign_name_prefixed(self):
        assert get_logger("scanner").name == "loc_analyzer.scanner"

    def test_lookalike_prefix_is_prefixed(self):
        assert get_logger("loc_analyzer_extra").name == "loc_analyzer.loc_analyzer_extra"
