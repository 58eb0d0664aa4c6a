"""Tests for the application logging setup."""

import logging

import pytest

from hololearn.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger("hololearn")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class TestSetupLogging:

    def test_repeated_setup_does_not_stack_handlers(self, app_logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(app_logger.handlers) == 1
        assert app_logger.level == logging.DEBUG

    def test_file_handler_receives_records(self, app_logger, tmp_path):
        log_file = tmp_path / "hololearn.log"
        setup_logging(logging.INFO, log_file=str(log_file))
        logging.getLogger("hololearn.model.wave_field").info("field ready")
        for handler in app_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at level INFO." in text
        assert "hololearn.model.wave_field - INFO - field ready" in text

    def test_http_loggers_stay_at_warning(self, app_logger):
        setup_logging(logging.DEBUG)
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
