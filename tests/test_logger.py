"""Tests for the structured logger."""

import json
import logging

from pythonjsonlogger.json import JsonFormatter

from okta_mfa.utils.logger import LOGGER_NAME, Logger, logger


def test_logger_is_singleton():
    assert Logger() is logger
    assert logger.logger.name == LOGGER_NAME


def test_keyword_arguments_become_extra_fields():
    msg, kwargs = logger.process("Verifying factor", {"factor_id": "sms1", "exc_info": True})

    assert msg == "Verifying factor"
    assert kwargs == {"extra": {"factor_id": "sms1"}, "exc_info": True}


def test_no_extra_without_keyword_arguments():
    assert logger.process("No extra", {}) == ("No extra", {})


def test_error_records_caller_location(caplog):
    with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
        logger.error("Factor verification failed", status_code=400)

    record = caplog.records[-1]
    assert record.status_code == 400
    assert "test_logger.py:" in record.file


def test_handler_formats_records_as_json():
    handler = logger.logger.handlers[0]
    record = logging.LogRecord(
        LOGGER_NAME, logging.INFO, __file__, 1, "Verifying factor", None, None
    )
    record.factor_id = "sms1"

    assert isinstance(handler.formatter, JsonFormatter)
    body = json.loads(handler.formatter.format(record))
    assert body["message"] == "Verifying factor"
    assert body["log_level"] == "INFO"
    assert body["factor_id"] == "sms1"
    assert "@timestamp" in body
