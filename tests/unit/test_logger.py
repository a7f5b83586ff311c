"""Unit tests for logger configuration."""

import logging

import pytest

from resumetrics.utils.logger import RedactApiKeyFilter, get_logger


@pytest.mark.unit
def test_api_key_query_parameter_is_redacted():
    record = logging.LogRecord(
        "resumetrics.test", logging.ERROR, __file__, 1,
        "POST %s failed", ("https://host/v1/models/m:generateContent?key=AIzaSECRET&alt=json",), None,
    )
    RedactApiKeyFilter().filter(record)

    message = record.getMessage()
    assert "AIzaSECRET" not in message
    assert "?key=***&alt=json" in message


@pytest.mark.unit
def test_get_logger_adds_single_handler():
    logger = get_logger("resumetrics.test.single")
    get_logger("resumetrics.test.single")
    assert len(logger.handlers) == 1
