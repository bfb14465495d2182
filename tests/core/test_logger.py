"""
Unit tests for structured logging helpers.
"""
import json
import logging

from app.core.logger import JSONFormatter, mask_email, mask_token


def _record(**extra):
    record = logging.LogRecord(
        "app.api.contact", logging.INFO, __file__, 10, "CONTACT|sent|id=%s", ("abc",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context_fields():
    entry = json.loads(
        JSONFormatter().format(
            _record(submission_id="abc", locale="ar", action="sent", status_code=200)
        )
    )

    assert entry["message"] == "CONTACT|sent|id=abc"
    assert entry["submission_id"] == "abc"
    assert entry["locale"] == "ar"
    assert entry["action"] == "sent"
    assert entry["status_code"] == 200


def test_json_formatter_omits_absent_fields():
    entry = json.loads(JSONFormatter().format(_record()))

    assert "submission_id" not in entry
    assert entry["level"] == "INFO"


def test_mask_email():
    assert mask_email("jane@example.com") == "j***@example.com"
    assert mask_email("not-an-address") == "***masked***"
    assert mask_email("") == "***masked***"


def test_mask_token():
    assert mask_token("re_test_key_1234567890") == "re_t...7890"
    assert mask_token("short") == "***masked***"
