"""Tests for logging setup."""

import logging

import pytest

from coverage_sunburst.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_level():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield
    logger.setLevel(level)


class TestGetLogger:

    def test_module_names_kept(self):
        assert get_logger("coverage_sunburst.catalog").name == "coverage_sunburst.catalog"

    def test_foreign_names_nested(self):
        assert get_logger("renderer").name == "coverage_sunburst.renderer"

    def test_default_is_package_logger(self):
        assert get_logger() is logging.getLogger(PACKAGE_LOGGER)

    def test_prefix_lookalike_is_nested(self):
        assert get_logger("coverage_sunburst_extra").name == "coverage_sunburst.coverage_sunburst_extra"


class TestSetupLogging:

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_level_follows_verbosity(self, verbosity, level):
        assert setup_logging(verbosity).level == level

    def test_unknown_verbosity_falls_back_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING
