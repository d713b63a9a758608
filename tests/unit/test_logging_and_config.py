"""
Unit Tests for Logging, Configuration and Exceptions
Purpose: Ambient engine plumbing
"""

import logging

import pytest

from propdesk_engine.config import (
    ARCHIVE_MAX_PAGE_SIZE,
    DEFAULT_FILTER_KEY,
    FILTER_PRESETS_KEY,
    USER_PREFERENCES_KEY,
    get_preferences_path,
)
from propdesk_engine.exceptions import NotFoundError, PropdeskException, ValidationError
from propdesk_engine.utils import ensure_directory, get_logger, setup_logging
from propdesk_engine.utils.logging_utils import ENGINE_LOGGER_NAME


class TestLogging:

    def test_module_loggers_share_package_handler(self):
        get_logger("propdesk_engine.project_query")
        get_logger("propdesk_engine.theme_engine")
        package_logger = logging.getLogger(ENGINE_LOGGER_NAME)
        assert len(package_logger.handlers) >= 1
        handler_count = len(package_logger.handlers)
        setup_logging()
        assert len(package_logger.handlers) == handler_count

    def test_level_by_name(self):
        logger = setup_logging(level="debug")
        assert logger.level == logging.DEBUG
        setup_logging(level=logging.INFO)
        assert logger.level == logging.INFO

    def test_warning_reaches_caplog(self, caplog, prefs, raw_store):
        raw_store.set_item("broken", "{oops")
        with caplog.at_level(logging.WARNING):
            prefs.load("broken")
        assert "not valid JSON" in caplog.text


class TestConfig:

    def test_storage_keys(self, engine_config):
        assert FILTER_PRESETS_KEY == "projectFilterPresets"
        assert DEFAULT_FILTER_KEY == "defaultProjectFilter"
        assert USER_PREFERENCES_KEY == "userPreferences"
        assert engine_config["archive_max_page_size"] == ARCHIVE_MAX_PAGE_SIZE == 100

    def test_preferences_path(self):
        assert get_preferences_path().name == "preferences.json"

    def test_ensure_directory(self, temp_dir):
        target = ensure_directory(temp_dir / "a" / "b")
        assert target.is_dir()
        with pytest.raises(ValueError):
            ensure_directory("  ")


class TestExceptions:

    def test_message_with_details(self):
        err = ValidationError("Invalid hex colour", "'#zz'")
        assert str(err) == "Invalid hex colour: '#zz'"
        assert isinstance(err, PropdeskException)

    def test_message_only(self):
        assert str(NotFoundError("Filter preset not found")) == "Filter preset not found"
