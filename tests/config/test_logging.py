"""Tests for the logging configuration module."""

import logging

import pytest

from scriptpress.config import ScriptPressSettings, configure_logging, get_logger
from scriptpress.config.logging import get_logger as raw_get_logger


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the root logger after each test."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    root_logger.setLevel(original_level)
    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
    for handler in original_handlers:
        root_logger.addHandler(handler)


class TestConfigureLogging:
    def test_default_level_is_warning(self):
        configure_logging(ScriptPressSettings(_env_file=None))

        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", logging.DEBUG), ("INFO", logging.INFO), ("error", logging.ERROR)],
    )
    def test_levels(self, level, expected):
        configure_logging(ScriptPressSettings(log_level=level))

        assert logging.getLogger().level == expected

    def test_third_party_loggers_stay_quiet(self):
        configure_logging(ScriptPressSettings(log_level="DEBUG"))

        assert logging.getLogger("reportlab").level == logging.INFO
        assert logging.getLogger("fontTools").level == logging.INFO

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "scriptpress.log"
        configure_logging(
            ScriptPressSettings(log_level="INFO", log_format="json", log_file=log_file)
        )

        raw_get_logger("scriptpress.test").info("Wrote PDF", pages=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Wrote PDF" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    def test_loggers_are_cached(self):
        assert get_logger("scriptpress.cached") is get_logger("scriptpress.cached")

    def test_logger_accepts_keyword_context(self):
        logger = get_logger("scriptpress.kwargs")

        logger.debug("Laid out script", pages=2, bookmarks=1)
