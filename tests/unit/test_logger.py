"""
Tests for harness logger naming and LOG_LEVEL handling.
"""

import logging

import pytest

from storefront_e2e.utils.logger import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    resolve_level,
)


@pytest.fixture
def restore_level():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved = root.level
    yield root
    root.setLevel(saved)


class TestGetLogger:

    def test_child_logger_name(self):
        child = get_logger("http")
        assert child.name == "storefront_e2e.http"
        assert child.parent is logging.getLogger(ROOT_LOGGER_NAME)

    def test_nested_child_name(self):
        assert get_logger("e2e.performance").name == "storefront_e2e.e2e.performance"

    def test_no_name_returns_harness_logger(self):
        assert get_logger() is logging.getLogger(ROOT_LOGGER_NAME)


class TestLogLevel:

    def test_known_levels_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_unset_level_defaults_to_info(self):
        assert resolve_level(None) == logging.INFO
        assert resolve_level("") == logging.INFO

    def test_unknown_level_falls_back_with_warning(self):
        with pytest.warns(RuntimeWarning, match="verbose"):
            assert resolve_level("verbose") == logging.INFO

    def test_configure_from_env(self, monkeypatch, restore_level):
        monkeypatch.setenv("LOG_LEVEL", "error")
        configure_logging()
        assert restore_level.level == logging.ERROR

    def test_configure_with_bad_level_keeps_working(self, restore_level):
        with pytest.warns(RuntimeWarning):
            root = configure_logging("verbose")
        assert root.level == logging.INFO

    def test_handler_attached_once(self, restore_level):
        configure_logging("info")
        configure_logging("debug")
        assert len(restore_level.handlers) == 1
        assert restore_level.propagate is False
