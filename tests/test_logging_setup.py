"""Tests for debug file logging setup."""

import logging

import pytest

from yuka.logging_setup import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def clean_logger():
    """Detach handlers from the app logger before and after each test."""
    logger = logging.getLogger(LOGGER_NAME)

    def _reset():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    _reset()
    yield logger
    _reset()


def test_writes_to_log_file(tmp_path, clean_logger):
    log_file = tmp_path / "debug.log"
    setup_logging(log_file, "DEBUG")
    get_logger("booking").info("booking_confirmed reference=YK-TEST0001")
    for handler in clean_logger.handlers:
        handler.flush()
    assert "booking_confirmed reference=YK-TEST0001" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_adds_one_file_handler(tmp_path, clean_logger):
    log_file = tmp_path / "debug.log"
    setup_logging(log_file)
    setup_logging(log_file)
    assert len(clean_logger.handlers) == 1


@pytest.mark.parametrize("level", ["BASIC_FORMAT", "loud", ""])
def test_unknown_level_falls_back_to_info(tmp_path, clean_logger, level):
    setup_logging(tmp_path / "debug.log", level)
    assert clean_logger.level == logging.INFO


def test_level_name_is_case_insensitive(tmp_path, clean_logger):
    setup_logging(tmp_path / "debug.log", "warning")
    assert clean_logger.level == logging.WARNING


def test_unwritable_path_adds_single_null_handler(tmp_path, clean_logger):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    log_file = blocker / "debug.log"
    setup_logging(log_file)
    setup_logging(log_file)
    assert len(clean_logger.handlers) == 1
    assert type(clean_logger.handlers[0]) is logging.NullHandler


def test_get_logger_nests_under_app_logger():
    assert get_logger("booking").name == "yuka.booking"
    assert get_logger("yuka.ledger").name == "yuka.ledger"
