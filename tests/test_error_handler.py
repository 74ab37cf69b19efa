"""Tests for error handling helpers and the exception hierarchy"""

import logging

import pytest

from ankitrans.exceptions import (
    AnkiTransError,
    DictionaryFetchError,
    MalformedInputError,
    WordNotFoundError,
    WordValidationError,
)
from ankitrans.logging_config import setup_logging
from ankitrans.utils.error_handler import ErrorCollector, handle_errors


def test_handle_errors_returns_default():
    @handle_errors(default_return=[], log_level=logging.DEBUG)
    def broken():
        raise ValueError("boom")

    assert broken() == []


def test_handle_errors_reraises_selected():
    @handle_errors(default_return=None, reraise_on=KeyError)
    def broken():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        broken()


def test_error_collector_records_failures():
    collector = ErrorCollector()
    assert not collector.has_errors()

    error = WordNotFoundError("qwzxv")
    collector.add_error("qwzxv", error)
    assert collector.has_errors()
    assert collector.failures == [("qwzxv", error)]



def test_error_collector_log_levels(caplog):
    collector = ErrorCollector()
    collector.add_error("qwzxv", WordNotFoundError("qwzxv"))
    collector.add_error("apple", RuntimeError("parser exploded"))
    logger = logging.getLogger("ankitrans.tests")
    with caplog.at_level(logging.WARNING, logger="ankitrans.tests"):
        collector.log_all(logger)
    levels = [record.levelname for record in caplog.records]
    assert levels == ["WARNING", "ERROR"]


def test_exception_hierarchy():
    error = WordValidationError("", "Word cannot be empty")
    assert isinstance(error, MalformedInputError)
    assert isinstance(error, AnkiTransError)
    assert error.details["reason"] == "Word cannot be empty"

    fetch_error = DictionaryFetchError("apple", "https://cn.bing.com/dict/search", 429)
    assert "HTTP 429" in str(fetch_error)
    assert fetch_error.details["status_code"] == 429


def test_setup_logging_file_handler(tmp_path):
    log_file = tmp_path / "ankitrans.log"
    logger = setup_logging("DEBUG", str(log_file))
    try:
        assert logger.name == "ankitrans"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("ankitrans.core.extractor").debug("rule missed")
        for handler in logger.handlers:
            handler.flush()
        assert "rule missed" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
