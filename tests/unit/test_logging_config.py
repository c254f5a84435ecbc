"""Unit tests for JSON logging configuration."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from goldrush.logging_config import JsonFormatter, configure_logging


@pytest.fixture
def library_logger():
    target = logging.getLogger("goldrush.test-config")
    yield target
    target.handlers.clear()
    target.setLevel(logging.NOTSET)


class TestConfigureLogging:
    def test_installs_single_json_handler(self, library_logger):
        configure_logging("DEBUG", logger_name=library_logger.name)
        configure_logging("DEBUG", logger_name=library_logger.name)

        assert len(library_logger.handlers) == 1
        assert isinstance(library_logger.handlers[0].formatter, JsonFormatter)
        assert library_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, library_logger):
        configure_logging("chatty", logger_name=library_logger.name)
        assert library_logger.level == logging.INFO


class TestJsonFormatter:
    def test_exception_is_included_and_sanitized(self):
        try:
            raise RuntimeError("Authorization: Bearer cqt_secret")
        except RuntimeError:
            record = logging.makeLogRecord({"msg": "boom", "exc_info": sys.exc_info()})

        parsed = json.loads(JsonFormatter().format(record))

        assert "RuntimeError" in parsed["exception"]
        assert "cqt_secret" not in parsed["exception"]

    def test_non_json_values_are_stringified(self):
        record = logging.makeLogRecord({"msg": "x", "status_code": object()})
        parsed = json.loads(JsonFormatter().format(record))
        assert isinstance(parsed["status_code"], str)
