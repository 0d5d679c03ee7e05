"""
Logging configuration tests.
"""

import logging

import pytest

from millcert.logger import logger, resolve_level


class TestResolveLevel:

    @pytest.mark.parametrize("name,expected", [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("Error", logging.ERROR),
    ])
    def test_known_names(self, name, expected):
        assert resolve_level(name) == expected

    @pytest.mark.parametrize("name", ["LOUD", ""])
    def test_unknown_names_fall_back_to_info(self, name):
        assert resolve_level(name) == logging.INFO

    def test_single_console_handler(self):
        assert logger.name == "millcert"
        assert len(logger.handlers) == 1
